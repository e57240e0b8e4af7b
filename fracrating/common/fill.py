"""Value <-> fill mappings for a row of rating slots.

Every slot below the display value is full, every slot above it is empty,
and the single slot straddling a fractional value is partially filled.
"""


def fill_fraction(index: int, display_value: float):
    icon_value = index + 1
    if display_value >= icon_value:
        return 100
    if index < display_value < icon_value:
        return (display_value - index) * 100
    return 0


def slot_fractions(count: int, display_value: float):
    return [fill_fraction(index, display_value) for index in range(max(count, 0))]


def value_from_fractions(fractions: list[float]):
    return sum(fractions) / 100


def clip_width(fraction: float, size: float):
    # Clip region can never reveal more than the whole slot, or less than nothing
    return min(max(size * fraction / 100, 0), size)


def row_width(count: int, size: float, spacing: float):
    if count <= 0:
        return 0
    return count * size + (count - 1) * spacing


def slot_at(offset: float, count: int, size: float, spacing: float):
    if offset < 0 or offset >= row_width(count, size, spacing):
        return None
    index, within = divmod(offset, size + spacing)
    if within >= size:
        return None  # In the gap between two slots
    return int(index)
