from sushi_reservierung.app import default_admin_date
from sushi_reservierung.core.backend import BackendError


def full_day(seats=6):
    return [{"slot": s, "availableSeats": seats, "maxCapacity": 6} for s in range(40)]


def test_calendar_renders_window(client, backend):
    backend.batch_error = BackendError("kaputt")
    backend.days = {"2025-06-25": full_day(4)}

    response = client.get('/')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "6/25(水)" in html
    assert "残4" in html
    assert "date=2025-06-25" in html
    # Tage ohne Daten sind komplett ausgebucht
    assert "date=2025-06-24" not in html


def test_reservation_form_limits_party_size(client, backend):
    day = full_day(6)
    day[10]["availableSeats"] = 3
    backend.days = {"2025-06-25": day}

    response = client.get('/reservieren?date=2025-06-25&time=18:00')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<option value="3">' in html
    assert '<option value="4">' not in html


def test_reservation_form_redirects_when_full(client, backend):
    backend.days = {"2025-06-25": full_day(0)}
    response = client.get('/reservieren?date=2025-06-25&time=18:00')
    assert response.status_code == 302


def test_reservation_form_redirects_on_invalid_input(client, backend):
    assert client.get('/reservieren?date=2025-06-25&time=18:10').status_code == 302
    assert client.get('/reservieren?date=2024-01-01&time=18:00').status_code == 302
    assert backend.calls == []


def test_api_create_reservation(client, backend):
    response = client.post('/api/reservierung', json={
        "date": "2025-06-25", "time": "01:15", "name": "山田太郎", "phone": "090-1234-5678", "partySize": 4
    })

    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["reservation"]["timeSlot"] == 29
    assert data["redirect_url"] == "/"
    assert backend.calls[-1] == ("create", "2025-06-25", 29, 4, "山田太郎", "090-1234-5678")


def test_api_create_reservation_validation_error(client, backend):
    response = client.post('/api/reservierung', json={"date": "2025-06-25", "time": "01:15", "partySize": 2})
    assert response.status_code == 400
    assert response.get_json()["success"] is False
    assert backend.calls == []


def test_api_create_reservation_backend_conflict(client, backend):
    backend.create_error = BackendError("Not enough seats", status_code=409)

    response = client.post('/api/reservierung', json={
        "date": "2025-06-25", "time": "18:00", "name": "A", "phone": "1", "partySize": 6
    })

    assert response.status_code == 409
    assert response.get_json()["message"] == "Not enough seats"


def test_api_create_reservation_backend_down(client, backend):
    backend.create_error = BackendError("Backend nicht erreichbar")
    response = client.post('/api/reservierung', json={
        "date": "2025-06-25", "time": "18:00", "name": "A", "phone": "1", "partySize": 1
    })
    assert response.status_code == 502


def test_search_reservations(client, backend):
    backend.reservations = [
        {"id": "cafebabe-0000-1111-2222-333344445555", "date": "2025-06-25", "timeSlot": 26, "partySize": 2,
         "name": "山田", "phone": "090", "status": "CONFIRMED"},
        {"id": "deadbeef-0000", "date": "2025-06-26", "timeSlot": 0, "partySize": 2,
         "name": "山田", "phone": "090", "status": "CANCELLED"},
    ]

    response = client.post('/api/reservierungen_suchen', json={"phone": "090"})

    data = response.get_json()
    assert data["success"] is True
    first, second = data["reservations"]
    assert first["time"] == "00:30"
    assert first["short_id"] == "44445555"
    assert first["display_date"] == "2025年6月25日(水)"
    assert first["status_label"] == "確定"
    assert first["deletable"] is True
    assert second["deletable"] is False


def test_search_reservations_requires_phone(client, backend):
    response = client.post('/api/reservierungen_suchen', json={"phone": " "})
    assert response.status_code == 400
    assert response.get_json()["message"] == "電話番号を入力してください"


def test_language_switch(client, backend):
    client.get('/set_language/en')
    response = client.post('/api/reservierungen_suchen', json={})
    assert response.get_json()["message"] == "Please enter your phone number"


def test_guest_delete(client, backend):
    backend.reservations = [{"id": "r1", "date": "2025-06-25", "timeSlot": 0, "partySize": 1, "phone": "1"}]

    assert client.delete('/api/reservierung_loeschen/r1').status_code == 200
    assert client.delete('/api/reservierung_loeschen/r1').status_code == 404


def test_admin_dashboard_requires_login(client, backend):
    response = client.get('/admin')
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/login")

    response = client.delete('/api/admin/reservierung_loeschen/r1')
    assert response.status_code == 401


def test_admin_login_flow(client, backend):
    response = client.post('/admin/login', data={"password": "falsch"})
    assert response.status_code == 200
    assert "ログインに失敗しました" in response.get_data(as_text=True)

    response = client.post('/admin/login', data={"password": "geheim"})
    assert response.status_code == 302
    with client.session_transaction() as sess:
        assert sess["admin_logged_in"] is True


def test_admin_dashboard(admin_client, backend):
    backend.reservations = [
        {"id": "r1", "date": "2025-06-25", "timeSlot": 4, "partySize": 3, "name": "佐藤", "phone": "080",
         "startTime": "19:00", "endTime": "22:00"},
    ]
    backend.summary = {
        "date": "2025-06-25", "totalReservations": 1, "totalGuests": 3,
        "hourlyOccupancy": {"19:00": {"occupiedSeats": 3, "availableSeats": 3,
                                      "reservations": [{"name": "佐藤", "partySize": 3, "phone": "080"}]}}
    }

    response = admin_client.get('/admin?date=2025-06-25')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "佐藤" in html
    assert "19:00 - 22:00" in html
    assert "5%" in html
    assert "level-medium" in html


def test_admin_dashboard_logs_out_on_rejected_password(admin_client, backend):
    backend.admin_password = "neu"
    response = admin_client.get('/admin?date=2025-06-25')
    assert response.status_code == 302


def test_admin_delete(admin_client, backend):
    backend.reservations = [{"id": "r1", "date": "2025-06-25", "timeSlot": 0, "partySize": 1, "phone": "1"}]
    response = admin_client.delete('/api/admin/reservierung_loeschen/r1')
    assert response.status_code == 200
    assert backend.reservations == []


def test_calendar_cells_show_slot_range(client, backend):
    backend.batch_error = BackendError("kaputt")
    backend.days = {"2025-06-25": full_day(4)}

    html = client.get('/').get_data(as_text=True)

    assert "18:00-18:15 (4/6)" in html
    assert "03:45-04:00" in html


def test_manage_page_inserts_guest_data_as_text(client, backend):
    html = client.get('/meine_reservierungen').get_data(as_text=True)

    assert "innerHTML" not in html
    assert "name.textContent = r.name" in html


def test_admin_session_cookie_is_http_only(client, backend):
    response = client.post('/admin/login', data={"password": "geheim"})

    cookie = response.headers["Set-Cookie"]
    assert "HttpOnly" in cookie
    assert "SameSite=Lax" in cookie


def test_default_admin_date():
    assert default_admin_date([]) is None
    assert default_admin_date(["2025-06-20", "2025-06-21"]) == "2025-06-20"
