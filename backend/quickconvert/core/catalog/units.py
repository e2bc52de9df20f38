"""Static unit catalog. Every dimension converts through its own base unit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Dimension(Enum):
    ANGLE = "angle"                          # base: degrees
    AREA = "area"                            # base: square meters
    CONCENTRATION_MASS = "concentration_mass"  # base: grams per liter
    DURATION = "duration"                    # base: seconds
    ELECTRIC_CHARGE = "electric_charge"      # base: coulombs
    ELECTRIC_CURRENT = "electric_current"    # base: amperes
    ELECTRIC_POTENTIAL = "electric_potential"  # base: volts
    ELECTRIC_RESISTANCE = "electric_resistance"  # base: ohms
    ENERGY = "energy"                        # base: joules
    FREQUENCY = "frequency"                  # base: hertz
    FUEL_EFFICIENCY = "fuel_efficiency"      # base: liters per 100 kilometers
    INFORMATION_STORAGE = "information_storage"  # base: bytes
    LENGTH = "length"                        # base: meters
    MASS = "mass"                            # base: kilograms
    POWER = "power"                          # base: watts
    PRESSURE = "pressure"                    # base: newtons per square meter
    SPEED = "speed"                          # base: meters per second
    TEMPERATURE = "temperature"              # base: kelvin
    VOLUME = "volume"                        # base: liters


@dataclass(frozen=True)
class UnitDefinition:
    names: tuple[str, ...]
    symbol: str
    dimension: Dimension
    coefficient: float = 1.0
    constant: float = 0.0
    reciprocal: bool = False

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError(f"Unit '{self.symbol}' needs at least one name")

    @property
    def name(self) -> str:
        """Canonical display name."""
        return self.names[0]


def _unit(
    names: str | tuple[str, ...],
    symbol: str,
    dimension: Dimension,
    coefficient: float = 1.0,
    constant: float = 0.0,
    *,
    imperial: bool = False,
    reciprocal: bool = False,
) -> UnitDefinition:
    if isinstance(names, str):
        names = (names,)
    if imperial:
        symbol = f"imperial {symbol}"
    return UnitDefinition(names, symbol, dimension, coefficient, constant, reciprocal)


_A = Dimension.ANGLE
_AR = Dimension.AREA
_CM = Dimension.CONCENTRATION_MASS
_D = Dimension.DURATION
_EC = Dimension.ELECTRIC_CHARGE
_EI = Dimension.ELECTRIC_CURRENT
_EV = Dimension.ELECTRIC_POTENTIAL
_ER = Dimension.ELECTRIC_RESISTANCE
_EN = Dimension.ENERGY
_F = Dimension.FREQUENCY
_FE = Dimension.FUEL_EFFICIENCY
_I = Dimension.INFORMATION_STORAGE
_L = Dimension.LENGTH
_M = Dimension.MASS
_P = Dimension.POWER
_PR = Dimension.PRESSURE
_S = Dimension.SPEED
_T = Dimension.TEMPERATURE
_V = Dimension.VOLUME

# Left out: acceleration (gravity "g" clashes with grams), dispersion and
# illuminance (single unit each), molar concentration (needs a molar mass).
CATALOG: tuple[UnitDefinition, ...] = (
    # ── Angle ──
    _unit("degrees", "°", _A),
    _unit("arc minutes", "ʹ", _A, 1 / 60),
    _unit("arc seconds", "ʺ", _A, 1 / 3600),
    _unit("radians", "rad", _A, 180 / math.pi),
    _unit("gradians", "grad", _A, 0.9),
    _unit("revolutions", "rev", _A, 360.0),

    # ── Area ──
    _unit("square megameters", "Mm²", _AR, 1e12),
    _unit("square kilometers", "km²", _AR, 1e6),
    _unit("square meters", "m²", _AR),
    _unit("square centimeters", "cm²", _AR, 1e-4),
    _unit(("square millimeters", "square millimiters"), "mm²", _AR, 1e-6),
    _unit("square micrometers", "µm²", _AR, 1e-12),
    _unit("square nanometers", "nm²", _AR, 1e-18),
    _unit("square inches", "in²", _AR, 0.00064516),
    _unit("square feet", "ft²", _AR, 0.09290304),
    _unit("square yards", "yd²", _AR, 0.83612736),
    _unit("square miles", "mi²", _AR, 2589988.110336),
    _unit("acres", "ac", _AR, 4046.8564224),
    _unit("ares", "a", _AR, 100.0),
    _unit("hectares", "ha", _AR, 10000.0),

    # ── Concentration of mass ──
    _unit("grams per liter", "g/L", _CM),
    _unit("milligrams per deciliter", "mg/dL", _CM, 0.01),

    # ── Duration ──
    _unit("seconds", "s", _D),
    _unit("minutes", "min", _D, 60.0),
    _unit("hours", "hr", _D, 3600.0),

    # ── Electric charge ──
    _unit("coulombs", "C", _EC),
    _unit("megaampere hours", "MAh", _EC, 3.6e9),
    _unit("kiloampere hours", "kAh", _EC, 3.6e6),
    _unit("ampere hours", "Ah", _EC, 3600.0),
    _unit("milliampere hours", "mAh", _EC, 3.6),
    _unit("microampere hours", "µAh", _EC, 0.0036),

    # ── Electric current ──
    _unit("megaamperes", "MA", _EI, 1e6),
    _unit("kiloamperes", "kA", _EI, 1e3),
    _unit("amperes", "A", _EI),
    _unit("milliamperes", "mA", _EI, 1e-3),
    _unit("microamperes", "µA", _EI, 1e-6),

    # ── Electric potential difference ──
    _unit("megavolts", "MV", _EV, 1e6),
    _unit("kilovolts", "kV", _EV, 1e3),
    _unit("volts", "V", _EV),
    _unit("millivolts", "mV", _EV, 1e-3),
    _unit("microvolts", "µV", _EV, 1e-6),

    # ── Electric resistance ──
    _unit("megaohms", "MΩ", _ER, 1e6),
    _unit("kiloohms", "kΩ", _ER, 1e3),
    _unit("ohms", "Ω", _ER),
    _unit("milliohms", "mΩ", _ER, 1e-3),
    _unit("microohms", "µΩ", _ER, 1e-6),

    # ── Energy ──
    _unit("kilojoules", "kJ", _EN, 1e3),
    _unit("joules", "J", _EN),
    _unit("kilocalories", "kCal", _EN, 4184.0),
    _unit("calories", "cal", _EN, 4.184),
    _unit("kilowatt hours", "kWh", _EN, 3.6e6),

    # ── Frequency ──
    _unit("terahertz", "THz", _F, 1e12),
    _unit("gigahertz", "GHz", _F, 1e9),
    _unit("megahertz", "MHz", _F, 1e6),
    _unit("kilohertz", "kHz", _F, 1e3),
    _unit("hertz", "Hz", _F),
    _unit("millihertz", "mHz", _F, 1e-3),
    _unit("microhertz", "µHz", _F, 1e-6),
    _unit("nanohertz", "nHz", _F, 1e-9),

    # ── Fuel efficiency ──
    _unit("liters per 100 kilometers", "L/100km", _FE),
    _unit("miles per gallon", "mpg", _FE, 235.214583, reciprocal=True),
    _unit("miles per imperial gallon", "mpg", _FE, 282.480936, imperial=True, reciprocal=True),

    # ── Information storage ──
    _unit("nibbles", "nibble", _I, 0.5),
    _unit("bits", "bit", _I, 0.125),
    _unit("bytes", "B", _I),

    _unit("kilobits", "kb", _I, 1e3 / 8),
    _unit("megabits", "Mb", _I, 1e6 / 8),
    _unit("gigabits", "Gb", _I, 1e9 / 8),
    _unit("terabits", "Tb", _I, 1e12 / 8),
    _unit("petabits", "Pb", _I, 1e15 / 8),
    _unit("exabits", "Eb", _I, 1e18 / 8),
    _unit("zettabits", "Zb", _I, 1e21 / 8),
    _unit("yottabits", "Yb", _I, 1e24 / 8),

    _unit("kibibits", "Kib", _I, 2 ** 10 / 8),
    _unit("mebibits", "Mib", _I, 2 ** 20 / 8),
    _unit("gibibits", "Gib", _I, 2 ** 30 / 8),
    _unit("tebibits", "Tib", _I, 2 ** 40 / 8),
    _unit("pebibits", "Pib", _I, 2 ** 50 / 8),
    _unit("exbibits", "Eib", _I, 2 ** 60 / 8),
    _unit("zebibits", "Zib", _I, 2 ** 70 / 8),
    _unit("yobibits", "Yib", _I, 2 ** 80 / 8),

    _unit("kilobytes", "kB", _I, 1e3),
    _unit("megabytes", "MB", _I, 1e6),
    _unit("gigabytes", "GB", _I, 1e9),
    _unit("terabytes", "TB", _I, 1e12),
    _unit("petabytes", "PB", _I, 1e15),
    _unit("exabytes", "EB", _I, 1e18),
    _unit("zettabytes", "ZB", _I, 1e21),
    _unit("yottabytes", "YB", _I, 1e24),

    _unit("kibibytes", "KiB", _I, 2 ** 10),
    _unit("mebibytes", "MiB", _I, 2 ** 20),
    _unit("gibibytes", "GiB", _I, 2 ** 30),
    _unit("tebibytes", "TiB", _I, 2 ** 40),
    _unit("pebibytes", "PiB", _I, 2 ** 50),
    _unit("exbibytes", "EiB", _I, 2 ** 60),
    _unit("zebibytes", "ZiB", _I, 2 ** 70),
    _unit("yobibytes", "YiB", _I, 2 ** 80),

    # ── Length ──
    _unit("megameters", "Mm", _L, 1e6),
    _unit("kilometers", "km", _L, 1e3),
    _unit("hectometers", "hm", _L, 100.0),
    _unit("decameters", "dam", _L, 10.0),
    _unit("meters", "m", _L),
    _unit("decimeters", "dm", _L, 0.1),
    _unit("centimeters", "cm", _L, 0.01),
    _unit("millimeters", "mm", _L, 0.001),
    _unit("micrometers", "µm", _L, 1e-6),
    _unit("nanometers", "nm", _L, 1e-9),
    _unit("picometers", "pm", _L, 1e-12),
    _unit("inches", "in", _L, 0.0254),
    _unit("feet", "ft", _L, 0.3048),
    _unit("yards", "yd", _L, 0.9144),
    _unit("miles", "mi", _L, 1609.344),
    _unit("scandinavian miles", "smi", _L, 10000.0),
    _unit("light years", "ly", _L, 9.4607304725808e15),
    _unit("nautical miles", "NM", _L, 1852.0),
    _unit("fathoms", "ftm", _L, 1.8288),
    _unit("furlongs", "fur", _L, 201.168),
    _unit("astronomical units", "ua", _L, 1.495978707e11),
    _unit("parsecs", "pc", _L, 3.0856775814913673e16),

    # ── Mass ──
    _unit("kilograms", "kg", _M),
    _unit("grams", "g", _M, 1e-3),
    _unit("decigrams", "dg", _M, 1e-4),
    _unit("centigrams", "cg", _M, 1e-5),
    _unit("milligrams", "mg", _M, 1e-6),
    _unit("micrograms", "µg", _M, 1e-9),
    _unit("nanograms", "ng", _M, 1e-12),
    _unit("picograms", "pg", _M, 1e-15),
    _unit("ounces", "oz", _M, 0.028349523125),
    _unit("pounds", "lb", _M, 0.45359237),
    _unit("stones", "st", _M, 6.35029318),
    _unit("metric tons", "t", _M, 1000.0),
    _unit("short tons", "ton", _M, 907.18474),
    _unit("carats", "ct", _M, 0.0002),
    _unit("ounces troy", "oz t", _M, 0.0311034768),
    _unit("slugs", "slug", _M, 14.593903),

    # ── Power ──
    _unit("terawatts", "TW", _P, 1e12),
    _unit("gigawatts", "GW", _P, 1e9),
    _unit("megawatts", "MW", _P, 1e6),
    _unit("kilowatts", "kW", _P, 1e3),
    _unit("watts", "W", _P),
    _unit("milliwatts", "mW", _P, 1e-3),
    _unit("microwatts", "µW", _P, 1e-6),
    _unit("nanowatts", "nW", _P, 1e-9),
    _unit("picowatts", "pW", _P, 1e-12),
    _unit("femtowatts", "fW", _P, 1e-15),
    _unit("horsepower", "hp", _P, 745.69987158227022),

    # ── Pressure ──
    _unit("pascals", "N/m²", _PR),
    _unit("gigapascals", "GPa", _PR, 1e9),
    _unit("megapascals", "MPa", _PR, 1e6),
    _unit("kilopascals", "kPa", _PR, 1e3),
    _unit("hectopascals", "hPa", _PR, 100.0),
    _unit("inches of mercury", "inHg", _PR, 3386.389),
    _unit("bars", "bar", _PR, 1e5),
    _unit("millibars", "mbar", _PR, 100.0),
    _unit(("millimeters of mercury", "millimiters of mercury"), "mmHg", _PR, 133.322387415),
    _unit(("standard atmospheres", "atmospheres"), "atm", _PR, 101325.0),
    _unit(("pounds per square inch", "pound per square inch"), "psi", _PR, 6894.757293168),

    # ── Speed ──
    _unit("meters per second", "m/s", _S),
    _unit("kilometers per hour", "km/h", _S, 1 / 3.6),
    _unit("miles per hour", "mph", _S, 0.44704),
    _unit("knots", "kn", _S, 1852 / 3600),

    # ── Temperature ──
    _unit(("kelvin", "k"), "K", _T),
    _unit(("degrees celsius", "celsius", "centigrade", "c"), "°C", _T, 1.0, 273.15),
    _unit(("degrees fahrenheit", "fahrenheit", "f"), "°F", _T, 5 / 9, 273.15 - 160 / 9),

    # ── Volume ──
    _unit("megaliters", "ML", _V, 1e6),
    _unit("kiloliters", "kL", _V, 1e3),
    _unit("liters", "L", _V),
    _unit("deciliters", "dL", _V, 0.1),
    _unit("centiliters", "cL", _V, 0.01),
    _unit("milliliters", "mL", _V, 0.001),
    _unit("cubic kilometers", "km³", _V, 1e12),
    _unit("cubic meters", "m³", _V, 1e3),
    _unit("cubic decimeters", "dm³", _V),
    _unit("cubic centimeters", "cm³", _V, 1e-3),
    _unit("cubic millimeters", "mm³", _V, 1e-6),
    _unit("cubic inches", "in³", _V, 0.016387064),
    _unit("cubic feet", "ft³", _V, 28.316846592),
    _unit("cubic yards", "yd³", _V, 764.554857984),
    _unit("cubic miles", "mi³", _V, 4.168181825440579e12),
    _unit("acre feet", "af", _V, 1233481.83754752),
    _unit("bushels", "bsh", _V, 35.23907016688),
    _unit("teaspoons", "tsp", _V, 0.00492892159375),
    _unit("tablespoons", "tbsp", _V, 0.01478676478125),
    _unit("fluid ounces", "fl oz", _V, 0.0295735295625),
    _unit("cups", "cup", _V, 0.24),
    _unit("pints", "pt", _V, 0.473176473),
    _unit("quarts", "qt", _V, 0.946352946),
    _unit("gallons", "gal", _V, 3.785411784),
    _unit("imperial teaspoons", "tsp", _V, 0.00591938802083, imperial=True),
    _unit("imperial tablespoons", "tbsp", _V, 0.0177581640625, imperial=True),
    _unit("imperial fluid ounces", "fl oz", _V, 0.0284130625, imperial=True),
    _unit("imperial pints", "pt", _V, 0.56826125, imperial=True),
    _unit("imperial quarts", "qt", _V, 1.1365225, imperial=True),
    _unit("imperial gallons", "gal", _V, 4.54609, imperial=True),
    _unit("metric cups", "metric cup", _V, 0.25),
)


def same_dimension(unit: UnitDefinition, catalog: tuple[UnitDefinition, ...] = CATALOG) -> list[UnitDefinition]:
    """Units that can be converted to/from ``unit``, excluding ``unit`` itself."""
    return [u for u in catalog if u.dimension == unit.dimension and u != unit]
