import pytest

from sushi_reservierung.app import app as flask_app
from sushi_reservierung.core import manager
from sushi_reservierung.core.backend import BackendError


class FakeBackend:
    """Ersetzt den HTTP-Client; Verhalten pro Test über Attribute steuerbar."""

    def __init__(self):
        self.batch = None
        self.batch_error = None
        self.days = {}
        self.reservations = []
        self.admin_password = "geheim"
        self.summary = {}
        self.create_error = None
        self.calls = []

    def get_batch_availability(self, start_date, end_date):
        self.calls.append(("batch", start_date, end_date))
        if self.batch_error:
            raise self.batch_error
        return self.batch or {}

    def get_day_availability(self, date_str):
        self.calls.append(("day", date_str))
        day = self.days.get(date_str)
        if day is None:
            raise BackendError(f"Keine Verfügbarkeitsdaten für {date_str}", status_code=500)
        return day

    def create_reservation(self, date_str, time_slot, party_size, name, phone):
        self.calls.append(("create", date_str, time_slot, party_size, name, phone))
        if self.create_error:
            raise self.create_error
        return {
            "reservation": {
                "id": "res-0000-12345678", "date": date_str, "timeSlot": time_slot, "partySize": party_size,
                "name": name, "phone": phone, "status": "CONFIRMED"
            },
            "sms": "sent"
        }

    def find_reservations_by_phone(self, phone):
        self.calls.append(("find", phone))
        return [r for r in self.reservations if r.get("phone") == phone]

    def delete_reservation(self, reservation_id):
        self.calls.append(("delete", reservation_id))
        if not any(r["id"] == reservation_id for r in self.reservations):
            raise BackendError("Reservation not found", status_code=404)
        self.reservations = [r for r in self.reservations if r["id"] != reservation_id]
        return True

    def admin_login(self, password):
        self.calls.append(("admin_login",))
        return password == self.admin_password

    def _check_password(self, password):
        if password != self.admin_password:
            raise BackendError("Unauthorized", status_code=401)

    def admin_reservations(self, password, date_str):
        self._check_password(password)
        return [r for r in self.reservations if r.get("date") == date_str]

    def admin_summary(self, password, date_str):
        self._check_password(password)
        return self.summary

    def admin_delete_reservation(self, password, reservation_id):
        self._check_password(password)
        return self.delete_reservation(reservation_id)


@pytest.fixture
def backend():
    fake = FakeBackend()
    manager.set_backend(fake)
    yield fake
    manager.set_backend(None)


@pytest.fixture
def client(backend):
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['admin_logged_in'] = True
        sess['admin_password'] = "geheim"
    return client
