"""Equipment List Generator - rental package for the shoot"""

from typing import List

from storyscope.models import EquipmentList
from storyscope.models.production import (
    CameraSpecs,
    CameraEquipment,
    LensEquipment,
    LightingEquipment,
    AudioEquipment,
    SupportEquipment,
    AccessoryEquipment,
    PowerEquipment,
    StorageEquipment,
)
from .base import SceneGenerator

BASE_LENSES = [
    dict(model="24-70mm f/2.8", focal_length="24-70mm", aperture="f/2.8", purpose="Primary versatile lens", cost=100),
    dict(model="85mm f/1.4", focal_length="85mm", aperture="f/1.4", purpose="Portrait and close-ups", cost=75),
]
EXTRA_LENSES = [
    (['wide', 'establishing', 'landscape'],
     dict(model="16-35mm f/2.8", focal_length="16-35mm", aperture="f/2.8", purpose="Wide establishing shots", cost=90)),
    (['telephoto', 'distant', 'compression'],
     dict(model="70-200mm f/2.8", focal_length="70-200mm", aperture="f/2.8", purpose="Telephoto and compression",
          cost=120)),
]

BASE_LIGHTING = [
    dict(type="LED Panel", model="1x1 LED Panel", power="100W", accessories=["Barn doors", "Diffusion"], cost=75),
    dict(type="Softbox", model="2x3 Softbox Kit", power="N/A", accessories=["Stand", "Speed ring"], cost=50),
]
EXTRA_LIGHTING = [
    (['dramatic', 'hard'],
     dict(type="Fresnel", model="Tungsten Fresnel", power="650W", accessories=["Barn doors", "Scrims"], cost=60)),
    (['outdoor', 'daylight'],
     dict(type="HMI", model="Daylight HMI", power="575W", accessories=["Ballast", "Safety cable"], cost=150)),
]

BASE_AUDIO = [
    dict(type="Audio Recorder", model="Professional Field Recorder", specifications="32-bit float, 8 channels",
         purpose="Primary audio recording", cost=100),
    dict(type="Boom Microphone", model="Shotgun Microphone", specifications="Super-cardioid, 20Hz-20kHz",
         purpose="Boom recording", cost=50),
    dict(type="Wireless Lavalier", model="Wireless Lav System", specifications="UHF, 100m range",
         purpose="Subject recording", cost=75),
]
EXTRA_AUDIO = [
    (['interview', 'dialogue'],
     dict(type="Handheld Microphone", model="Dynamic Handheld Mic", specifications="Cardioid, rugged build",
          purpose="Interview backup", cost=25)),
]

BASE_SUPPORT = [
    dict(type="Tripod", model="Carbon Fiber Tripod", capacity="15kg payload", purpose="Static shots", cost=75),
]
EXTRA_SUPPORT = [
    (['movement', 'dynamic', 'smooth'],
     dict(type="Gimbal", model="3-Axis Gimbal Stabilizer", capacity="3kg payload", purpose="Smooth movement",
          cost=100)),
    (['track', 'dolly'],
     dict(type="Dolly", model="Camera Dolly with Track", capacity="50kg payload", purpose="Tracking shots", cost=200)),
]

ACCESSORIES = [
    dict(name="Memory Cards", purpose="Camera storage", quantity=4, cost=20),
    dict(name="Batteries", purpose="Equipment power", quantity=8, cost=40),
    dict(name="Lens Filters", purpose="Image control", quantity=3, cost=30),
    dict(name="Cables", purpose="Connectivity", quantity=10, cost=25),
]

POWER = [
    dict(type="V-Mount Batteries", capacity="150Wh", duration="4-6 hours", cost=60),
    dict(type="AC Power Adapters", capacity="Mains power", duration="Unlimited", cost=20),
    dict(type="Portable Generator", capacity="2000W", duration="8 hours", cost=100),
]

STORAGE = [
    dict(type="CFexpress Cards", capacity="512GB", speed="1700MB/s", cost=80),
    dict(type="Portable SSD", capacity="2TB", speed="1000MB/s", cost=60),
    dict(type="Backup Drive", capacity="4TB", speed="200MB/s", cost=40),
]


def pick(words: str, model, base: List[dict], extras) -> list:
    """Base items plus every extra whose keywords appear, in table order"""
    rows = list(base) + [row for keywords, row in extras if any(k in words for k in keywords)]
    return [model(**row) for row in rows]


def cinema_camera() -> CameraEquipment:
    return CameraEquipment(
        body="Professional Cinema Camera",
        specifications=CameraSpecs(
            sensor="Full Frame CMOS",
            resolution="4K UHD",
            frame_rates=[24, 30, 60, 120],
            codecs=["ProRes 422", "H.264", "RAW"],
            low_light="ISO 3200 native, 12800 max",
        ),
        alternatives=["DSLR/Mirrorless alternative", "Broadcast camera"],
        cost=500,
        availability="Rental house",
    )


class EquipmentListGenerator(SceneGenerator):
    """Assemble the rental package"""

    def __init__(self, *args, **kwargs):
        super().__init__("equipment", *args, **kwargs)

    def generate(self, description: str) -> EquipmentList:
        words = description.lower()
        return EquipmentList(
            camera=cinema_camera(),
            lenses=pick(words, LensEquipment, BASE_LENSES, EXTRA_LENSES),
            lighting=pick(words, LightingEquipment, BASE_LIGHTING, EXTRA_LIGHTING),
            audio=pick(words, AudioEquipment, BASE_AUDIO, EXTRA_AUDIO),
            support=pick(words, SupportEquipment, BASE_SUPPORT, EXTRA_SUPPORT),
            accessories=[AccessoryEquipment(**row) for row in ACCESSORIES],
            power=[PowerEquipment(**row) for row in POWER],
            storage=[StorageEquipment(**row) for row in STORAGE],
        )
