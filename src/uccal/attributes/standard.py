from __future__ import annotations
from typing import Any, Dict

from ..core.types import MappedDate
from ..engines import leap
from .registry import register_attribute
from . import ages, decans, festivals, moon

def moon_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {"moon": moon.moon_phase(days), "moon_symbol": moon.moon_symbol(days)}

def age_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {"yuga": ages.yuga(m.year)}

def zodiac_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {"zodiac": ages.zodiac(m.year)}

def festival_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    f = festivals.festival_info(m.doy)
    return {"festival": f.name, "festival_number": f.number, "festival_symbol": f.symbol}

def intercal_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {
        "intercal": festivals.intercal(m.doy),
        "intercal_symbol": festivals.intercal_symbol(m.doy),
        "intercals": festivals.intercals(m.doy, leap.is_leap_year(m.year)),
    }

def decan_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {
        "deek_number": decans.deek_number(m.triad, m.day),
        "deek_day": decans.deek_day(m.triad, m.day),
        "greek_day": decans.greek_day(m.triad, m.day),
        "hind_day": decans.hind_day(m.triad, m.day),
        "deek_symbol": decans.deek_symbol(m.triad, m.day),
    }

def leap_attrs(m: MappedDate, days: int) -> Dict[str, Any]:
    return {
        "leap_year": leap.is_leap_year(m.year),
        "leap_days": leap.leap_days(m.year),
        "leap_cycle": leap.leap_cycle(m.year),
        "leap_offset": leap.leap_offset(m.year),
    }

register_attribute("moon", moon_attrs)
register_attribute("yuga", age_attrs)
register_attribute("zodiac", zodiac_attrs)
register_attribute("festival", festival_attrs)
register_attribute("intercal", intercal_attrs)
register_attribute("decan", decan_attrs)
register_attribute("leap", leap_attrs)
