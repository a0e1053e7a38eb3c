"""Name and symbol tables of the UCC calendar."""

from __future__ import annotations

from typing import Tuple

TRIADS: Tuple[str, ...] = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)
TSYMBOLS: Tuple[str, ...] = (
    "♈", "♉", "♊", "♋", "♌", "♍",
    "♎", "♏", "♐", "♑", "♒", "♓",
)
NUMBERS: Tuple[str, ...] = (
    "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX",
    "SEVEN", "EIGHT", "NINE", "TEN", "ELEVEN", "TWELVE",
)

# Decan ("deek") days, indexed by day-of-triad mod 10
DECANS: Tuple[str, ...] = (
    "Neptune", "Sol", "Mercury", "Venus", "Earth",
    "Mars", "Ceres", "Jupiter", "Saturn", "Uranus",
)
GREECANS: Tuple[str, ...] = (
    "Poseidon", "Helios", "Hermes", "Aphrodite", "Terra",
    "Ares", "Demeter", "Zeus", "Cronus", "Caelus",
)
HICANS: Tuple[str, ...] = (
    "Varuna", "Surya", "Budha", "Shukra", "Thal",
    "Mangala", "Shakti", "Guru", "Shani", "Vasuki",
)
DSYMBOLS: Tuple[str, ...] = (
    "♆", "☉", "☿", "♀", "⊕",
    "♂", "⚳", "♃", "♄", "♅",
)

MOONS: Tuple[str, ...] = (
    "New", "Waxing crescent", "1st quarter", "Waxing gibbous",
    "Full", "Waning gibbous", "3rd quarter", "Waning crescent",
)
MSYMBOLS: Tuple[str, ...] = (
    "\U0001F311", "\U0001F312", "\U0001F313", "\U0001F314",
    "\U0001F315", "\U0001F316", "\U0001F317", "\U0001F318",
)
