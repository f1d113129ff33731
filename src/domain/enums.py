"""Transport modes and their canonical presentation order."""

import enum


class TransportMode(str, enum.Enum):
    TRAIN = "Train"
    COMBUSTION_CAR = "Voiture thermique"
    ELECTRIC_CAR = "Voiture électrique"
    PLANE = "Avion"
    COACH = "Autocar"


# Order used by charts / tables; the engine itself follows table order
DISPLAY_ORDER: tuple[str, ...] = (
    TransportMode.TRAIN.value,
    TransportMode.COMBUSTION_CAR.value,
    TransportMode.ELECTRIC_CAR.value,
    TransportMode.PLANE.value,
    TransportMode.COACH.value,
)
