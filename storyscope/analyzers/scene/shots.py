"""Shot List Generator"""

from typing import List

from storyscope.models import ShotSize, CameraAngle, Shot
from storyscope.models.production import ShotMovement, ShotEquipment, ShotLighting, ShotAudio
from storyscope.models.visual import MovementType
from .base import SceneGenerator

PRIMARY_CAMERA = "Primary camera"
SUBJECT_KEYWORDS = ['person', 'character', 'interview']
MOVEMENT_KEYWORDS = ['movement', 'walking', 'action']


def locked_off(start: str) -> ShotMovement:
    """Static tripod framing"""
    return ShotMovement(type=MovementType.STATIC, start=start, end="Hold", speed="N/A", equipment="Tripod")


def establishing_shot(ids) -> Shot:
    return Shot(
        id=ids("shot"),
        number="1A",
        description="Establishing shot of location",
        shot_size=ShotSize.WIDE,
        angle=CameraAngle.EYE_LEVEL,
        movement=locked_off("Wide view"),
        duration=5,
        equipment=ShotEquipment(
            camera=PRIMARY_CAMERA, lens="Wide angle lens", support="Tripod", accessories=["Lens filters"],
        ),
        lighting=ShotLighting(setup="Natural or base lighting"),
        audio=ShotAudio(
            primary="Room tone", backup="Ambient recording", monitoring="Headphones",
            notes=["Record clean room tone"],
        ),
        notes=["Set the scene context", "Establish location"],
        alternatives=["Drone shot if outdoor", "Gimbal movement for dynamic feel"],
    )


def subject_shot(ids) -> Shot:
    return Shot(
        id=ids("shot"),
        number="2A",
        description="Medium shot of primary subject",
        shot_size=ShotSize.MEDIUM,
        angle=CameraAngle.EYE_LEVEL,
        movement=locked_off("Medium framing"),
        duration=10,
        equipment=ShotEquipment(
            camera=PRIMARY_CAMERA, lens="Standard lens (50mm equivalent)", support="Tripod",
            accessories=["Lens filters", "Matte box"],
        ),
        lighting=ShotLighting(
            setup="Key + fill lighting",
            key_changes=["Adjust for subject"],
            special_requirements=["Eye light", "Background separation"],
        ),
        audio=ShotAudio(
            primary="Lavalier microphone", backup="Boom microphone", monitoring="Wireless monitoring",
            notes=["Check levels", "Monitor for clothing rustle"],
        ),
        notes=["Focus on subject", "Ensure good eye contact"],
        alternatives=["Slight angle for more dynamic feel", "Handheld for intimacy"],
    )


def close_up_shot(ids) -> Shot:
    return Shot(
        id=ids("shot"),
        number="3A",
        description="Close-up for emotional connection",
        shot_size=ShotSize.CLOSE_UP,
        angle=CameraAngle.EYE_LEVEL,
        movement=locked_off("Close framing"),
        duration=8,
        equipment=ShotEquipment(
            camera=PRIMARY_CAMERA, lens="Portrait lens (85mm equivalent)", support="Tripod",
            accessories=["Lens filters"],
        ),
        lighting=ShotLighting(
            setup="Refined key lighting",
            key_changes=["Soften shadows", "Add eye light"],
            special_requirements=["Careful shadow control"],
        ),
        audio=ShotAudio(
            primary="Lavalier microphone", backup="Boom microphone", monitoring="Direct monitoring",
            notes=["Critical audio quality"],
        ),
        notes=["Emotional moment", "Sharp focus on eyes"],
        alternatives=["Rack focus for emphasis", "Slight movement for life"],
    )


def tracking_shot(ids) -> Shot:
    return Shot(
        id=ids("shot"),
        number="4A",
        description="Tracking shot following movement",
        shot_size=ShotSize.MEDIUM_WIDE,
        angle=CameraAngle.EYE_LEVEL,
        movement=ShotMovement(
            type=MovementType.TRACK,
            start="Behind subject",
            end="Following movement",
            speed="medium",
            equipment="Gimbal or dolly",
        ),
        duration=12,
        equipment=ShotEquipment(
            camera=PRIMARY_CAMERA, lens="Standard lens", support="Gimbal stabilizer",
            accessories=["Follow focus", "Monitor"],
        ),
        lighting=ShotLighting(
            setup="Natural lighting",
            key_changes=["Adapt to changing conditions"],
            special_requirements=["Consistent exposure"],
        ),
        audio=ShotAudio(
            primary="Wireless lavalier", backup="Boom operator following", monitoring="Wireless monitoring",
            notes=["Manage cable/wireless range"],
        ),
        notes=["Smooth movement", "Maintain focus"],
        alternatives=["Handheld for documentary feel", "Drone for aerial perspective"],
    )


class ShotListGenerator(SceneGenerator):
    """
    Build the shot list.

    Every scene gets an establishing shot and a close-up; a subject shot is
    added when a person is mentioned and a tracking shot when there is
    movement. Shots are returned in shooting order.
    """

    def __init__(self, *args, **kwargs):
        super().__init__("shot_list", *args, **kwargs)

    def generate(self, description: str) -> List[Shot]:
        words = description.lower()

        shots = [establishing_shot(self.ids)]
        if any(k in words for k in SUBJECT_KEYWORDS):
            shots.append(subject_shot(self.ids))
        shots.append(close_up_shot(self.ids))
        if any(k in words for k in MOVEMENT_KEYWORDS):
            shots.append(tracking_shot(self.ids))

        return shots
