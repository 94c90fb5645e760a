"""Meter matching: fit a scanned line to a sequence of foot templates.

Feet are matched from the end of the line backwards. Each meter is a
recipe of steps; a step lists foot groups to try in order, and within a
group the first template that fits the tail of the line wins and its
syllables are consumed. A line is valid when every step matched and no
syllables are left over.
"""

import logging

from scansion.types import Foot, Meter, MeterMatch, Quantity, Slot, Syllable

logger = logging.getLogger(__name__)

L, S, E = Slot.LONG, Slot.SHORT, Slot.EITHER

SPONDEE = (
    (L, L), (L, E), (E, L),
)

# Brevis in longo: a short final syllable counts as long at line end
FINAL_SPONDEE = SPONDEE + (
    (L, S), (E, S),
)

DACTYL = (
    (L, S, S), (L, E, S), (L, S, E), (E, S, S),
)

# A step is a tuple of (foot name, template group) alternatives
METERS: dict[Meter, list[tuple[tuple[str, tuple], ...]]] = {
    Meter.HEXAMETER: (
        [(("final spondee", FINAL_SPONDEE),)]
        + [(("dactyl", DACTYL), ("spondee", SPONDEE))] * 5
    ),
}


def _fits(template: tuple[Slot, ...], tail: list[Quantity]) -> bool:
    if len(tail) < len(template):
        return False
    return all(
        slot.accepts(quantity)
        for slot, quantity in zip(reversed(template), reversed(tail))
    )


def match_tail(
    group: tuple[tuple[Slot, ...], ...],
    syllables: list[Syllable],
) -> int:
    """Return how many trailing syllables the group's first fitting template covers.

    Returns 0 when no template in the group fits.
    """
    quantities = [syl.quantity for syl in syllables]
    for template in group:
        if _fits(template, quantities):
            return len(template)
    return 0


def _resolve(meter: Meter | str) -> Meter | None:
    if isinstance(meter, Meter):
        return meter
    try:
        return Meter(str(meter).lower())
    except ValueError:
        return None


def scan_meter(line: list[list[Syllable]], meter: Meter | str = Meter.HEXAMETER) -> MeterMatch:
    """Match a scanned line against a meter, keeping the matched feet.

    Word boundaries are ignored. Never raises; an unknown meter or a
    failed match gives an invalid result with the reason set.
    """
    resolved = _resolve(meter)
    name = resolved.value if resolved else str(meter)
    if resolved is None or resolved not in METERS:
        return MeterMatch(valid=False, meter=name, reason=f"unsupported meter: {meter}")

    remaining = [syl for word in line for syl in word]
    if not remaining:
        return MeterMatch(valid=False, meter=name, reason="empty line")

    feet: list[Foot] = []
    steps = METERS[resolved]
    for number, step in enumerate(steps):
        position = len(steps) - number
        if not remaining:
            return MeterMatch(
                valid=False, meter=name, feet=feet,
                reason=f"line too short for foot {position}",
            )
        for foot_name, group in step:
            count = match_tail(group, remaining)
            if count:
                feet.insert(0, Foot(name=foot_name, syllables=remaining[-count:]))
                remaining = remaining[:-count]
                break
        else:
            return MeterMatch(
                valid=False, meter=name, feet=feet,
                reason=f"no foot {position}",
            )

    if remaining:
        logger.debug(f"{len(remaining)} syllables left over for {name}")
        return MeterMatch(
            valid=False, meter=name, feet=feet,
            reason=f"syllables left over: {len(remaining)}",
        )
    return MeterMatch(valid=True, meter=name, feet=feet)


def matches(line: list[list[Syllable]], meter: Meter | str = Meter.HEXAMETER) -> bool:
    """True if the scanned line is a valid line of the given meter."""
    return scan_meter(line, meter).valid
