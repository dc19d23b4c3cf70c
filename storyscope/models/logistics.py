"""Schedule, weather and budget models"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_serializer

from .base import Record


class ScheduleBlock(Record):
    id: str
    start_time: str
    end_time: str
    activity: str
    location: str
    crew: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class CrewMember(Record):
    role: str
    call_time: str
    wrap_time: str
    rate: float = Field(default=0, ge=0)


class TransportationPlan(Record):
    crew: str
    equipment: str
    parking: str
    costs: float


class CateringPlan(Record):
    meals: List[str] = Field(default_factory=list)
    dietary: List[str] = Field(default_factory=list)
    cost: float
    vendor: Optional[str] = None


class PermitStatus(Record):
    type: str
    status: str = Field(default="pending", description="pending, approved, denied or not-required")
    cost: float
    valid_dates: str


class InsuranceInfo(Record):
    coverage: List[str] = Field(default_factory=list)
    cost: float
    provider: str
    valid_dates: str


class LogisticsInfo(Record):
    transportation: TransportationPlan
    catering: CateringPlan
    permits: List[PermitStatus] = Field(default_factory=list)
    insurance: InsuranceInfo


class ProductionSchedule(Record):
    """Shoot day plan"""
    shoot_date: datetime
    call_time: str = "08:00"
    wrap_time: str = "18:00"
    timeline: List[ScheduleBlock] = Field(default_factory=list)
    crew: List[CrewMember] = Field(default_factory=list)
    logistics: LogisticsInfo

    @field_serializer('shoot_date')
    def serialize_datetime(self, value: datetime) -> str:
        return value.isoformat()


class TemperatureRange(Record):
    high: float
    low: float
    unit: str = "celsius"


class WindInfo(Record):
    speed: float
    direction: str
    gusts: float


class WeatherForecast(Record):
    date: datetime
    temperature: TemperatureRange
    conditions: str
    precipitation: float = Field(..., ge=0, le=100, description="Percent chance")
    wind: WindInfo
    visibility: str
    sunrise: str
    sunset: str

    @field_serializer('date')
    def serialize_datetime(self, value: datetime) -> str:
        return value.isoformat()


class WeatherContingency(Record):
    condition: str
    plan: str
    equipment: List[str] = Field(default_factory=list)
    timeline: str


class WeatherEquipment(Record):
    item: str
    purpose: str
    quantity: int


class WeatherAlternative(Record):
    scenario: str
    location: Optional[str] = None
    schedule: Optional[str] = None
    impact: str


class WeatherConsiderations(Record):
    """Forecast placeholder plus contingency planning"""
    forecast: WeatherForecast
    contingencies: List[WeatherContingency] = Field(default_factory=list)
    equipment: List[WeatherEquipment] = Field(default_factory=list)
    alternatives: List[WeatherAlternative] = Field(default_factory=list)


class BudgetItem(Record):
    name: str
    quantity: int
    rate: float
    total: float
    notes: Optional[str] = None


class BudgetCategory(Record):
    category: str
    items: List[BudgetItem] = Field(default_factory=list)
    subtotal: float


class BudgetEstimate(Record):
    """Cost estimate; total is the category sum plus a 10% contingency"""
    total: float
    breakdown: List[BudgetCategory] = Field(default_factory=list)
    contingency: float
    currency: str = "USD"
