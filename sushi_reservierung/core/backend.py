"""
HTTP-Anbindung an den Reservierungs-Backend-Service.

Speicherung, Authentifizierung und Doppelbuchungsschutz liegen komplett im
Backend; hier werden nur die Aufrufe gekapselt und Fehler vereinheitlicht.
"""
import logging

import requests
from requests.exceptions import RequestException

from . import config

logger = logging.getLogger(__name__)


class BackendError(Exception):
    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or []


class BackendClient:
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except RequestException as e:
            logger.error(f"Backend nicht erreichbar ({method} {url}): {e}")
            raise BackendError("Backend nicht erreichbar", status_code=None) from e

        if not response.ok:
            message, details = self._error_message(response)
            logger.warning(f"Backend-Fehler {response.status_code} bei {method} {url}: {message}")
            raise BackendError(message, status_code=response.status_code, details=details)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Ungültige JSON-Antwort von {method} {url}: {e}")
            raise BackendError("Ungültige Antwort vom Backend", status_code=response.status_code) from e

    @staticmethod
    def _error_message(response):
        try:
            data = response.json()
        except ValueError:
            return f"HTTP {response.status_code}", []
        if not isinstance(data, dict):
            return f"HTTP {response.status_code}", []
        message = data.get('message') or data.get('error') or f"HTTP {response.status_code}"
        return message, data.get('details') or []

    @staticmethod
    def _expect(data, expected_type, what):
        if not isinstance(data, expected_type):
            logger.error(f"Unerwartetes Antwortformat für {what}: {type(data).__name__}")
            raise BackendError("Ungültige Antwort vom Backend")
        return data

    # --- Verfügbarkeit ---

    def get_batch_availability(self, start_date, end_date):
        data = self._request('GET', '/reservations/availability/batch',
                             params={'startDate': start_date, 'endDate': end_date})
        data = self._expect(data or {}, dict, "Batch-Verfügbarkeit")
        return self._expect(data.get('availability') or {}, dict, "Batch-Verfügbarkeit")

    def get_day_availability(self, date_str):
        data = self._request('GET', f'/reservations/availability/{date_str}')
        data = self._expect(data or {}, dict, f"Verfügbarkeit {date_str}")
        if 'availableSlots' not in data:
            raise BackendError(f"Keine Verfügbarkeitsdaten für {date_str}")
        return self._expect(data['availableSlots'], list, f"Verfügbarkeit {date_str}")

    # --- Gäste ---

    def create_reservation(self, date_str, time_slot, party_size, name, phone):
        payload = {
            "date": date_str,
            "timeSlot": time_slot,
            "partySize": party_size,
            "name": name,
            "phone": phone,
        }
        data = self._request('POST', '/reservations', json=payload) or {}
        return self._expect(data, dict, "Reservierung")

    def find_reservations_by_phone(self, phone):
        data = self._request('GET', '/reservations', params={'phone': phone}) or []
        return self._expect(data, list, "Reservierungssuche")

    def delete_reservation(self, reservation_id):
        self._request('DELETE', f'/reservations/{reservation_id}')
        return True

    # --- Admin ---

    def admin_login(self, password):
        try:
            self._request('POST', '/admin/login', json={'password': password})
        except BackendError as e:
            if e.status_code in (401, 403):
                return False
            raise
        return True

    def admin_reservations(self, password, date_str):
        data = self._request('POST', '/admin/reservations', json={'password': password, 'date': date_str})
        data = self._expect(data or {}, dict, "Admin-Reservierungen")
        return self._expect(data.get('reservations') or [], list, "Admin-Reservierungen")

    def admin_summary(self, password, date_str):
        data = self._request('POST', '/admin/summary', json={'password': password, 'date': date_str}) or {}
        return self._expect(data, dict, "Admin-Übersicht")

    def admin_delete_reservation(self, password, reservation_id):
        self._request('DELETE', f'/admin/reservations/{reservation_id}', json={'password': password})
        return True
