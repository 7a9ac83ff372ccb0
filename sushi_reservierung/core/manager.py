import logging
from datetime import datetime, timedelta

from . import config
from .backend import BackendClient, BackendError
from .models import Reservation, DailySummary
from .slots import (MAX_CAPACITY, InvalidSlotError, availability_by_slot, build_day_slots, max_bookable_seats,
                    time_to_slot, unavailable_day_slots)

logger = logging.getLogger(__name__)

_backend = None


class ReservationValidationError(ValueError):
    pass


def get_backend():
    global _backend
    if _backend is None:
        _backend = BackendClient()
    return _backend


def set_backend(backend):
    global _backend
    _backend = backend


def _match_batch_date(expected_date, availability):
    if expected_date in availability:
        return expected_date
    # Backend verschiebt Datumsschlüssel je nach Zeitzone um einen Tag
    expected = datetime.strptime(expected_date, "%Y-%m-%d").date()
    for offset in (-1, 1):
        candidate = (expected + timedelta(days=offset)).strftime("%Y-%m-%d")
        if candidate in availability:
            return candidate
    return None


def _fetch_batch(dates):
    availability = get_backend().get_batch_availability(dates[0], dates[-1])
    if not availability:
        raise BackendError("Batch-Antwort enthält keine Daten")

    availability_data = {}
    for expected_date in dates:
        api_date = _match_batch_date(expected_date, availability)
        day_data = availability.get(api_date) if api_date else None
        if not isinstance(day_data, dict) or not isinstance(day_data.get('availableSlots'), list):
            # Unvollständige Batch-Daten werden komplett verworfen
            raise BackendError(f"Keine Batch-Daten für {expected_date}")
        availability_data[expected_date] = build_day_slots(availability_by_slot(day_data['availableSlots']))
    return availability_data


def fetch_day_slots(date_str):
    """Einzelabfrage für einen Tag. Bei Fehlern ist der ganze Tag ausgebucht."""
    try:
        available_slots = get_backend().get_day_availability(date_str)
    except BackendError as e:
        logger.error(f"Verfügbarkeit für {date_str} konnte nicht geladen werden: {e}")
        return unavailable_day_slots()
    return build_day_slots(availability_by_slot(available_slots))


def fetch_availability(dates):
    if not dates:
        return {}
    try:
        return _fetch_batch(dates)
    except BackendError as e:
        logger.warning(f"Batch-Abfrage fehlgeschlagen, weiche auf Einzelabfragen aus: {e}")

    return {date_str: fetch_day_slots(date_str) for date_str in dates}


def load_schedule(dates=None):
    dates = dates or config.generate_date_range()
    availability_data = fetch_availability(dates)
    return [{"date": d, "slots": availability_data.get(d) or unavailable_day_slots()} for d in dates]


def is_date_in_window(date_str):
    return date_str in config.generate_date_range()


def seats_for_slot(date_str, time_str):
    """Buchbare Plätze für einen Start um time_str. Ungültige Eingaben -> 0."""
    if not is_date_in_window(date_str):
        return 0
    try:
        start_slot = time_to_slot(time_str)
    except InvalidSlotError:
        return 0
    try:
        available_slots = get_backend().get_day_availability(date_str)
    except BackendError as e:
        logger.error(f"Verfügbarkeit für {date_str} konnte nicht geladen werden: {e}")
        return 0
    return max_bookable_seats(start_slot, availability_by_slot(available_slots))


def validate_reservation_request(data):
    name = str(data.get('name') or "").strip()
    phone = str(data.get('phone') or "").strip()
    date_str = str(data.get('date') or "").strip()
    time_str = str(data.get('time') or "").strip()

    if not name:
        raise ReservationValidationError("Name fehlt.")
    if not phone:
        raise ReservationValidationError("Telefonnummer fehlt.")
    if not is_date_in_window(date_str):
        raise ReservationValidationError(f"Datum außerhalb des Reservierungszeitraums: {date_str}")
    try:
        time_slot = time_to_slot(time_str)
    except InvalidSlotError as e:
        raise ReservationValidationError(str(e)) from e
    try:
        party_size = int(data.get('partySize', data.get('guests', 1)))
    except (TypeError, ValueError) as e:
        raise ReservationValidationError("Ungültige Personenzahl.") from e
    if not 1 <= party_size <= MAX_CAPACITY:
        raise ReservationValidationError(f"Personenzahl muss zwischen 1 und {MAX_CAPACITY} liegen.")

    return {"date": date_str, "time_slot": time_slot, "party_size": party_size, "name": name, "phone": phone}


def create_reservation(data):
    request_data = validate_reservation_request(data)
    result = get_backend().create_reservation(
        request_data['date'], request_data['time_slot'], request_data['party_size'],
        request_data['name'], request_data['phone']
    )
    reservation = Reservation.from_dict(result.get('reservation') or {})
    logger.info(f"Reservierung angelegt: {reservation} (SMS: {result.get('sms', '-')})")
    return reservation, result.get('sms')


def find_reservations_by_phone(phone):
    phone = (phone or "").strip()
    if not phone:
        raise ReservationValidationError("Telefonnummer fehlt.")
    reservations = [Reservation.from_dict(r) for r in get_backend().find_reservations_by_phone(phone)]
    reservations.sort(key=lambda r: (r.date, r.time_slot))
    return reservations


def delete_reservation(reservation_id):
    get_backend().delete_reservation(reservation_id)
    logger.info(f"Reservierung {reservation_id} vom Gast gelöscht.")
    return True


def admin_login(password):
    if not password:
        return False
    return get_backend().admin_login(password)


def admin_reservations(password, date_str):
    reservations = [Reservation.from_dict(r) for r in get_backend().admin_reservations(password, date_str)]
    reservations.sort(key=lambda r: r.time_slot)
    return reservations


def admin_summary(password, date_str):
    return DailySummary.from_dict(get_backend().admin_summary(password, date_str))


def admin_delete_reservation(password, reservation_id):
    get_backend().admin_delete_reservation(password, reservation_id)
    logger.info(f"Reservierung {reservation_id} durch Admin gelöscht.")
    return True
