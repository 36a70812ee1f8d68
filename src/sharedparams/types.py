"""
Type Registry for shared parameter data types.

Maps the closed set of DATATYPE codes found in shared parameter files to
`TypeTag` members and back, and classifies every tag into a coarser
`UnitFamily` describing the physical quantity it carries.

The registry is a pure lookup table. It holds no state.
"""

from enum import Enum
from typing import Dict

from .errors import UnknownTypeTag


class UnitFamily(Enum):
    """
    Physical quantity family of a parameter.

    Tags without a physical unit (text, plain numbers, yes/no, URLs,
    element references) belong to NONE.
    """

    NONE = "none"
    LENGTH = "length"
    AREA = "area"
    VOLUME = "volume"
    ANGLE = "angle"
    SLOPE = "slope"
    CURRENCY = "currency"
    MASS = "mass"
    MASS_DENSITY = "mass_density"
    FORCE = "force"
    LINEAR_FORCE = "linear_force"
    AREA_FORCE = "area_force"
    MOMENT = "moment"
    STRESS = "stress"
    UNIT_WEIGHT = "unit_weight"
    THERMAL_EXPANSION = "thermal_expansion"
    ACCELERATION = "acceleration"
    SPEED = "speed"
    ENERGY = "energy"
    TIME = "time"
    FREQUENCY = "frequency"
    DENSITY = "density"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    VELOCITY = "velocity"
    FLOW = "flow"
    POWER = "power"
    POWER_DENSITY = "power_density"
    FRICTION = "friction"
    VISCOSITY = "viscosity"
    ROUGHNESS = "roughness"
    HEAT_TRANSFER = "heat_transfer"
    ELECTRICAL_CURRENT = "electrical_current"
    ELECTRICAL_POTENTIAL = "electrical_potential"
    ELECTRICAL_POWER = "electrical_power"
    ELECTRICAL_RESISTIVITY = "electrical_resistivity"
    ILLUMINANCE = "illuminance"
    LUMINOUS_FLUX = "luminous_flux"
    LUMINOUS_INTENSITY = "luminous_intensity"
    LUMINANCE = "luminance"
    EFFICACY = "efficacy"
    COLOR_TEMPERATURE = "color_temperature"


class TypeTag(Enum):
    """
    Recognised shared parameter data types.

    The member value is the canonical code written in the DATATYPE column.
    """

    # Common
    TEXT = "TEXT"
    MULTILINE_TEXT = "MULTILINETEXT"
    INTEGER = "INTEGER"
    NUMBER = "NUMBER"
    LENGTH = "LENGTH"
    AREA = "AREA"
    VOLUME = "VOLUME"
    ANGLE = "ANGLE"
    SLOPE = "SLOPE"
    CURRENCY = "CURRENCY"
    MASS_DENSITY = "MASS_DENSITY"
    URL = "URL"
    MATERIAL = "MATERIAL"
    IMAGE = "IMAGE"
    YES_NO = "YESNO"
    FAMILY_TYPE = "FAMILYTYPE"
    NUMBER_OF_POLES = "NUMBER_OF_POLES"
    LOAD_CLASSIFICATION = "LOADCLASSIFICATION"

    # Structural
    FORCE = "FORCE"
    LINEAR_FORCE = "LINEAR_FORCE"
    AREA_FORCE = "AREA_FORCE"
    MOMENT = "MOMENT"
    LINEAR_MOMENT = "LINEAR_MOMENT"
    STRESS = "STRESS"
    UNIT_WEIGHT = "UNIT_WEIGHT"
    WEIGHT = "WEIGHT"
    MASS = "MASS"
    MASS_PER_UNIT_AREA = "MASS_PER_UNIT_AREA"
    THERMAL_EXPANSION = "THERMAL_EXPANSION"
    DISPLACEMENT_DEFLECTION = "DISPLACEMENT/DEFLECTION"
    ROTATION = "ROTATION"
    PERIOD = "PERIOD"
    STRUCTURAL_FREQUENCY = "STRUCTURAL_FREQUENCY"
    SPEED = "SPEED"
    ACCELERATION = "ACCELERATION"
    ENERGY = "ENERGY"
    REINFORCEMENT_LENGTH = "REINFORCEMENT_LENGTH"
    REINFORCEMENT_AREA = "REINFORCEMENT_AREA"
    REINFORCEMENT_VOLUME = "REINFORCEMENT_VOLUME"
    REINFORCEMENT_SPACING = "REINFORCEMENT_SPACING"
    REINFORCEMENT_COVER = "REINFORCEMENT_COVER"
    BAR_DIAMETER = "BAR_DIAMETER"
    CRACK_WIDTH = "CRACK_WIDTH"
    SECTION_DIMENSION = "SECTION_DIMENSION"
    SECTION_AREA = "SECTION_AREA"

    # HVAC
    HVAC_DENSITY = "HVAC_DENSITY"
    HVAC_ENERGY = "HVAC_ENERGY"
    HVAC_FRICTION = "HVAC_FRICTION"
    HVAC_POWER = "HVAC_POWER"
    HVAC_POWER_DENSITY = "HVAC_POWER_DENSITY"
    HVAC_PRESSURE = "HVAC_PRESSURE"
    HVAC_TEMPERATURE = "HVAC_TEMPERATURE"
    HVAC_VELOCITY = "HVAC_VELOCITY"
    HVAC_AIR_FLOW = "HVAC_AIR_FLOW"
    HVAC_DUCT_SIZE = "HVAC_DUCT_SIZE"
    HVAC_CROSS_SECTION = "HVAC_CROSS_SECTION"
    HVAC_HEAT_GAIN = "HVAC_HEAT_GAIN"
    HVAC_ROUGHNESS = "HVAC_ROUGHNESS"
    HVAC_VISCOSITY = "HVAC_VISCOSITY"
    HVAC_COEFFICIENT_OF_HEAT_TRANSFER = "HVAC_COEFFICIENT_OF_HEAT_TRANSFER"
    HVAC_DUCT_INSULATION_THICKNESS = "HVAC_DUCT_INSULATION_THICKNESS"
    HVAC_DUCT_LINING_THICKNESS = "HVAC_DUCT_LINING_THICKNESS"
    HVAC_SLOPE = "HVAC_SLOPE"

    # Electrical
    ELECTRICAL_CURRENT = "ELECTRICAL_CURRENT"
    ELECTRICAL_POTENTIAL = "ELECTRICAL_POTENTIAL"
    ELECTRICAL_FREQUENCY = "ELECTRICAL_FREQUENCY"
    ELECTRICAL_ILLUMINANCE = "ELECTRICAL_ILLUMINANCE"
    ELECTRICAL_LUMINOUS_FLUX = "ELECTRICAL_LUMINOUS_FLUX"
    ELECTRICAL_LUMINOUS_INTENSITY = "ELECTRICAL_LUMINOUS_INTENSITY"
    ELECTRICAL_LUMINANCE = "ELECTRICAL_LUMINANCE"
    ELECTRICAL_EFFICACY = "ELECTRICAL_EFFICACY"
    ELECTRICAL_WATTAGE = "ELECTRICAL_WATTAGE"
    ELECTRICAL_POWER = "ELECTRICAL_POWER"
    ELECTRICAL_APPARENT_POWER = "ELECTRICAL_APPARENT_POWER"
    ELECTRICAL_POWER_DENSITY = "ELECTRICAL_POWER_DENSITY"
    ELECTRICAL_RESISTIVITY = "ELECTRICAL_RESISTIVITY"
    ELECTRICAL_TEMPERATURE = "ELECTRICAL_TEMPERATURE"
    ELECTRICAL_COLOR_TEMPERATURE = "COLOR_TEMPERATURE"
    ELECTRICAL_CABLE_TRAY_SIZE = "ELECTRICAL_CABLE_TRAY_SIZE"
    ELECTRICAL_CONDUIT_SIZE = "ELECTRICAL_CONDUIT_SIZE"
    ELECTRICAL_WIRE_SIZE = "WIRE_SIZE"
    ELECTRICAL_DEMAND_FACTOR = "ELECTRICAL_DEMAND_FACTOR"

    # Piping
    PIPING_DENSITY = "PIPING_DENSITY"
    PIPING_FLOW = "PIPING_FLOW"
    PIPING_FRICTION = "PIPING_FRICTION"
    PIPING_PRESSURE = "PIPING_PRESSURE"
    PIPING_TEMPERATURE = "PIPING_TEMPERATURE"
    PIPING_VELOCITY = "PIPING_VELOCITY"
    PIPING_VISCOSITY = "PIPING_VISCOSITY"
    PIPING_ROUGHNESS = "PIPING_ROUGHNESS"
    PIPING_VOLUME = "PIPING_VOLUME"
    PIPING_SLOPE = "PIPING_SLOPE"
    PIPE_SIZE = "PIPE_SIZE"
    PIPE_INSULATION_THICKNESS = "PIPE_INSULATION_THICKNESS"


_UNIT_FAMILIES: Dict[TypeTag, UnitFamily] = {
    TypeTag.TEXT: UnitFamily.NONE,
    TypeTag.MULTILINE_TEXT: UnitFamily.NONE,
    TypeTag.INTEGER: UnitFamily.NONE,
    TypeTag.NUMBER: UnitFamily.NONE,
    TypeTag.LENGTH: UnitFamily.LENGTH,
    TypeTag.AREA: UnitFamily.AREA,
    TypeTag.VOLUME: UnitFamily.VOLUME,
    TypeTag.ANGLE: UnitFamily.ANGLE,
    TypeTag.SLOPE: UnitFamily.SLOPE,
    TypeTag.CURRENCY: UnitFamily.CURRENCY,
    TypeTag.MASS_DENSITY: UnitFamily.MASS_DENSITY,
    TypeTag.URL: UnitFamily.NONE,
    TypeTag.MATERIAL: UnitFamily.NONE,
    TypeTag.IMAGE: UnitFamily.NONE,
    TypeTag.YES_NO: UnitFamily.NONE,
    TypeTag.FAMILY_TYPE: UnitFamily.NONE,
    TypeTag.NUMBER_OF_POLES: UnitFamily.NONE,
    TypeTag.LOAD_CLASSIFICATION: UnitFamily.NONE,

    TypeTag.FORCE: UnitFamily.FORCE,
    TypeTag.LINEAR_FORCE: UnitFamily.LINEAR_FORCE,
    TypeTag.AREA_FORCE: UnitFamily.AREA_FORCE,
    TypeTag.MOMENT: UnitFamily.MOMENT,
    TypeTag.LINEAR_MOMENT: UnitFamily.MOMENT,
    TypeTag.STRESS: UnitFamily.STRESS,
    TypeTag.UNIT_WEIGHT: UnitFamily.UNIT_WEIGHT,
    TypeTag.WEIGHT: UnitFamily.FORCE,
    TypeTag.MASS: UnitFamily.MASS,
    TypeTag.MASS_PER_UNIT_AREA: UnitFamily.MASS,
    TypeTag.THERMAL_EXPANSION: UnitFamily.THERMAL_EXPANSION,
    TypeTag.DISPLACEMENT_DEFLECTION: UnitFamily.LENGTH,
    TypeTag.ROTATION: UnitFamily.ANGLE,
    TypeTag.PERIOD: UnitFamily.TIME,
    TypeTag.STRUCTURAL_FREQUENCY: UnitFamily.FREQUENCY,
    TypeTag.SPEED: UnitFamily.SPEED,
    TypeTag.ACCELERATION: UnitFamily.ACCELERATION,
    TypeTag.ENERGY: UnitFamily.ENERGY,
    TypeTag.REINFORCEMENT_LENGTH: UnitFamily.LENGTH,
    TypeTag.REINFORCEMENT_AREA: UnitFamily.AREA,
    TypeTag.REINFORCEMENT_VOLUME: UnitFamily.VOLUME,
    TypeTag.REINFORCEMENT_SPACING: UnitFamily.LENGTH,
    TypeTag.REINFORCEMENT_COVER: UnitFamily.LENGTH,
    TypeTag.BAR_DIAMETER: UnitFamily.LENGTH,
    TypeTag.CRACK_WIDTH: UnitFamily.LENGTH,
    TypeTag.SECTION_DIMENSION: UnitFamily.LENGTH,
    TypeTag.SECTION_AREA: UnitFamily.AREA,

    TypeTag.HVAC_DENSITY: UnitFamily.DENSITY,
    TypeTag.HVAC_ENERGY: UnitFamily.ENERGY,
    TypeTag.HVAC_FRICTION: UnitFamily.FRICTION,
    TypeTag.HVAC_POWER: UnitFamily.POWER,
    TypeTag.HVAC_POWER_DENSITY: UnitFamily.POWER_DENSITY,
    TypeTag.HVAC_PRESSURE: UnitFamily.PRESSURE,
    TypeTag.HVAC_TEMPERATURE: UnitFamily.TEMPERATURE,
    TypeTag.HVAC_VELOCITY: UnitFamily.VELOCITY,
    TypeTag.HVAC_AIR_FLOW: UnitFamily.FLOW,
    TypeTag.HVAC_DUCT_SIZE: UnitFamily.LENGTH,
    TypeTag.HVAC_CROSS_SECTION: UnitFamily.AREA,
    TypeTag.HVAC_HEAT_GAIN: UnitFamily.POWER,
    TypeTag.HVAC_ROUGHNESS: UnitFamily.ROUGHNESS,
    TypeTag.HVAC_VISCOSITY: UnitFamily.VISCOSITY,
    TypeTag.HVAC_COEFFICIENT_OF_HEAT_TRANSFER: UnitFamily.HEAT_TRANSFER,
    TypeTag.HVAC_DUCT_INSULATION_THICKNESS: UnitFamily.LENGTH,
    TypeTag.HVAC_DUCT_LINING_THICKNESS: UnitFamily.LENGTH,
    TypeTag.HVAC_SLOPE: UnitFamily.SLOPE,

    TypeTag.ELECTRICAL_CURRENT: UnitFamily.ELECTRICAL_CURRENT,
    TypeTag.ELECTRICAL_POTENTIAL: UnitFamily.ELECTRICAL_POTENTIAL,
    TypeTag.ELECTRICAL_FREQUENCY: UnitFamily.FREQUENCY,
    TypeTag.ELECTRICAL_ILLUMINANCE: UnitFamily.ILLUMINANCE,
    TypeTag.ELECTRICAL_LUMINOUS_FLUX: UnitFamily.LUMINOUS_FLUX,
    TypeTag.ELECTRICAL_LUMINOUS_INTENSITY: UnitFamily.LUMINOUS_INTENSITY,
    TypeTag.ELECTRICAL_LUMINANCE: UnitFamily.LUMINANCE,
    TypeTag.ELECTRICAL_EFFICACY: UnitFamily.EFFICACY,
    TypeTag.ELECTRICAL_WATTAGE: UnitFamily.ELECTRICAL_POWER,
    TypeTag.ELECTRICAL_POWER: UnitFamily.ELECTRICAL_POWER,
    TypeTag.ELECTRICAL_APPARENT_POWER: UnitFamily.ELECTRICAL_POWER,
    TypeTag.ELECTRICAL_POWER_DENSITY: UnitFamily.POWER_DENSITY,
    TypeTag.ELECTRICAL_RESISTIVITY: UnitFamily.ELECTRICAL_RESISTIVITY,
    TypeTag.ELECTRICAL_TEMPERATURE: UnitFamily.TEMPERATURE,
    TypeTag.ELECTRICAL_COLOR_TEMPERATURE: UnitFamily.COLOR_TEMPERATURE,
    TypeTag.ELECTRICAL_CABLE_TRAY_SIZE: UnitFamily.LENGTH,
    TypeTag.ELECTRICAL_CONDUIT_SIZE: UnitFamily.LENGTH,
    TypeTag.ELECTRICAL_WIRE_SIZE: UnitFamily.LENGTH,
    TypeTag.ELECTRICAL_DEMAND_FACTOR: UnitFamily.NONE,

    TypeTag.PIPING_DENSITY: UnitFamily.DENSITY,
    TypeTag.PIPING_FLOW: UnitFamily.FLOW,
    TypeTag.PIPING_FRICTION: UnitFamily.FRICTION,
    TypeTag.PIPING_PRESSURE: UnitFamily.PRESSURE,
    TypeTag.PIPING_TEMPERATURE: UnitFamily.TEMPERATURE,
    TypeTag.PIPING_VELOCITY: UnitFamily.VELOCITY,
    TypeTag.PIPING_VISCOSITY: UnitFamily.VISCOSITY,
    TypeTag.PIPING_ROUGHNESS: UnitFamily.ROUGHNESS,
    TypeTag.PIPING_VOLUME: UnitFamily.VOLUME,
    TypeTag.PIPING_SLOPE: UnitFamily.SLOPE,
    TypeTag.PIPE_SIZE: UnitFamily.LENGTH,
    TypeTag.PIPE_INSULATION_THICKNESS: UnitFamily.LENGTH,
}

_BY_CODE: Dict[str, TypeTag] = {tag.value: tag for tag in TypeTag}


def decode_type(text: str) -> TypeTag:
    """
    Resolve a DATATYPE code to its TypeTag.

    Args:
        text: Code as written in the file (e.g. "LENGTH")

    Returns:
        The matching TypeTag

    Raises:
        UnknownTypeTag: If the code is not registered
    """
    tag = _BY_CODE.get((text or "").strip())
    if tag is None:
        raise UnknownTypeTag(text)
    return tag


def encode_type(tag: TypeTag) -> str:
    """Canonical DATATYPE code for a tag."""
    return tag.value


def unit_family_of(tag: TypeTag) -> UnitFamily:
    """Physical quantity family of a tag; NONE for unitless tags."""
    return _UNIT_FAMILIES.get(tag, UnitFamily.NONE)


__all__ = [
    "TypeTag",
    "UnitFamily",
    "decode_type",
    "encode_type",
    "unit_family_of",
]
