"""
Slot-Arithmetik für den Reservierungskalender.

Ein Geschäftstag hat 40 Slots à 15 Minuten, von 18:00 bis 27:45 (= 03:45 am
Folgetag). Geschlossen wird um 28:00. Eine Reservierung blockiert 12 Slots
(3 Stunden); ab Slot 28 (25:00) läuft sie nur noch bis Ladenschluss.
"""
import re

OPENING_HOUR = 18
SLOT_MINUTES = 15
SLOTS_PER_HOUR = 60 // SLOT_MINUTES
SLOT_COUNT = 40
LAST_SLOT = SLOT_COUNT - 1
MAX_CAPACITY = 6
RESERVATION_SLOTS = 12
# Letzter Start, bei dem die vollen 3 Stunden noch in den Tag passen
LAST_FULL_DURATION_START = LAST_SLOT - RESERVATION_SLOTS

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


class InvalidSlotError(ValueError):
    pass


def time_to_slot(time_str):
    """Wandelt "HH:MM" in einen Slot-Index (0-39) um.

    Stunden unter 18 gelten als nach Mitternacht ("00:30" -> 24:30).
    Die erweiterte Schreibweise "24:00" bis "27:45" wird ebenfalls akzeptiert.
    """
    match = _TIME_PATTERN.match(str(time_str).strip())
    if not match:
        raise InvalidSlotError(f"Ungültige Uhrzeit: {time_str!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes >= 60 or minutes % SLOT_MINUTES != 0:
        raise InvalidSlotError(f"Uhrzeit liegt nicht auf einer Viertelstunde: {time_str!r}")

    adjusted_hours = hours + 24 if hours < OPENING_HOUR else hours
    slot = (adjusted_hours - OPENING_HOUR) * SLOTS_PER_HOUR + minutes // SLOT_MINUTES
    if not 0 <= slot <= LAST_SLOT:
        raise InvalidSlotError(f"Uhrzeit außerhalb der Öffnungszeiten: {time_str!r}")
    return slot


def _check_slot(slot):
    if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot <= LAST_SLOT:
        raise InvalidSlotError(f"Ungültiger Slot: {slot!r}")


def slot_to_time(slot):
    _check_slot(slot)
    hour = OPENING_HOUR + slot // SLOTS_PER_HOUR
    if hour >= 24:
        hour -= 24
    minute = (slot % SLOTS_PER_HOUR) * SLOT_MINUTES
    return f"{hour:02d}:{minute:02d}"


def slot_range_label(slot):
    """Anzeige wie "18:00-18:15"."""
    if slot == LAST_SLOT:
        # Ende ist 04:00, liegt also schon außerhalb des Rasters
        return f"{slot_to_time(slot)}-04:00"
    return f"{slot_to_time(slot)}-{slot_to_time(slot + 1)}"


def generate_time_slots():
    return [slot_to_time(slot) for slot in range(SLOT_COUNT)]


def occupied_slots(start_slot):
    """Slots, die eine Reservierung ab start_slot belegt."""
    _check_slot(start_slot)
    if start_slot <= LAST_FULL_DURATION_START:
        end_slot = min(start_slot + RESERVATION_SLOTS - 1, LAST_SLOT)
    else:
        end_slot = LAST_SLOT
    return list(range(start_slot, end_slot + 1))


def max_bookable_seats(start_slot, per_slot_availability):
    """Maximale Personenzahl für eine Reservierung ab start_slot.

    per_slot_availability bildet Slot-Index -> freie Plätze ab und darf lückenhaft
    sein. Fehlt ein belegter Slot, gilt er als ausgebucht und das Ergebnis ist 0.
    """
    min_available_seats = MAX_CAPACITY
    for slot in occupied_slots(start_slot):
        seats = per_slot_availability.get(slot)
        if seats is None:
            return 0
        min_available_seats = min(min_available_seats, seats)
    return max(min_available_seats, 0)


def availability_by_slot(available_slots):
    """Backend-Einträge {slot, availableSeats, ...} -> {slot: availableSeats}."""
    result = {}
    for entry in available_slots or []:
        try:
            slot = int(entry["slot"])
            seats = int(entry.get("availableSeats", 0))
        except (KeyError, TypeError, ValueError):
            continue
        result[slot] = seats
    return result


def build_day_slots(per_slot_availability):
    """Alle 40 Zellen eines Tages, jeweils für eine 3-Stunden-Reservierung berechnet."""
    day_slots = []
    for slot in range(SLOT_COUNT):
        seats = max_bookable_seats(slot, per_slot_availability)
        day_slots.append({
            "time": slot_to_time(slot),
            "available": seats > 0,
            "availableSeats": seats,
            "maxCapacity": MAX_CAPACITY,
        })
    return day_slots


def unavailable_day_slots():
    return build_day_slots({})
