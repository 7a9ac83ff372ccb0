from flask import Flask, render_template, request, redirect, url_for, jsonify, session
import datetime
import logging

from .core import config, manager
from .core.backend import BackendError
from .core.manager import ReservationValidationError
from .core.slots import MAX_CAPACITY, SLOT_COUNT, InvalidSlotError, generate_time_slots, slot_range_label, time_to_slot
from .core.translations import TRANSLATIONS, DEFAULT_LANGUAGE

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO),
                    format='%(asctime)s %(levelname)s %(name)s %(threadName)s : %(message)s')

app = Flask(__name__)
app.secret_key = config.SECRET_KEY
# Die Sitzung enthält das Admin-Passwort: für Skripte unlesbar, nur per HTTPS wenn konfiguriert
app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE='Lax',
    SESSION_COOKIE_SECURE=config.SESSION_COOKIE_SECURE
)

# Endpunkte, die eine Admin-Sitzung brauchen
ADMIN_ROUTES = ['admin_dashboard', 'api_admin_delete_reservation']


def current_texts():
    return TRANSLATIONS.get(session.get('language', DEFAULT_LANGUAGE), TRANSLATIONS[DEFAULT_LANGUAGE])


def format_date_short(date_str_yyyy_mm_dd, weekdays):
    if not date_str_yyyy_mm_dd:
        return ""
    try:
        dt_obj = datetime.datetime.strptime(date_str_yyyy_mm_dd, "%Y-%m-%d")
    except ValueError:
        return date_str_yyyy_mm_dd
    return f"{dt_obj.month}/{dt_obj.day}({weekdays[dt_obj.weekday()]})"


def format_date_long(date_str_yyyy_mm_dd, lang, weekdays):
    if not date_str_yyyy_mm_dd:
        return ""
    try:
        dt_obj = datetime.datetime.strptime(date_str_yyyy_mm_dd, "%Y-%m-%d")
    except ValueError:
        return date_str_yyyy_mm_dd
    if lang == 'ja':
        return f"{dt_obj.year}年{dt_obj.month}月{dt_obj.day}日({weekdays[dt_obj.weekday()]})"
    return f"{weekdays[dt_obj.weekday()]}, {dt_obj.strftime('%d.%m.%Y')}"


def backend_error_response(error):
    status_code = error.status_code if error.status_code and 400 <= error.status_code < 500 else 502
    return jsonify({"success": False, "message": error.message, "details": error.details}), status_code


def reservation_for_display(res_obj, texts, lang):
    res_dict = res_obj.to_dict()
    res_dict['time'] = res_obj.time
    res_dict['short_id'] = res_obj.short_id
    res_dict['display_date'] = format_date_long(res_obj.date, lang, texts['weekdays'])
    res_dict['status_label'] = texts.get(f"status_{res_obj.status}", res_obj.status)
    res_dict['deletable'] = res_obj.is_deletable
    return res_dict


@app.context_processor
def inject_global_vars():
    return {
        'current_year': datetime.datetime.now().year,
        'active_nav_tab': request.endpoint,
        'MAX_CAPACITY': MAX_CAPACITY,
        'is_admin': session.get('admin_logged_in', False)
    }


@app.context_processor
def inject_translations():
    current_lang = session.get('language', DEFAULT_LANGUAGE)
    return dict(t=current_texts(), current_lang=current_lang)


@app.before_request
def require_admin_login():
    if request.endpoint not in ADMIN_ROUTES or session.get('admin_logged_in'):
        return None
    if request.path.startswith('/api/'):
        return jsonify({"success": False, "message": "Admin-Anmeldung erforderlich."}), 401
    return redirect(url_for('admin_login'))


@app.route('/set_language/<lang_code>')
def set_language(lang_code):
    if lang_code in TRANSLATIONS:
        session['language'] = lang_code
    return redirect(request.referrer or url_for('index'))


@app.route('/')
def index():
    texts = current_texts()
    schedule = manager.load_schedule()
    today_str = datetime.date.today().strftime("%Y-%m-%d")

    days = []
    for day in schedule:
        days.append({
            'date': day['date'],
            'label': format_date_short(day['date'], texts['weekdays']),
            'is_today': day['date'] == today_str,
            'slots': day['slots']
        })

    return render_template(
        'index.html',
        days=days,
        time_slots=generate_time_slots(),
        slot_labels=[slot_range_label(slot) for slot in range(SLOT_COUNT)]
    )


@app.route('/reservieren', methods=['GET'])
def reservation_form_page():
    texts = current_texts()
    lang = session.get('language', DEFAULT_LANGUAGE)
    selected_date = request.args.get('date', '')
    selected_time = request.args.get('time', '')

    if not manager.is_date_in_window(selected_date):
        return redirect(url_for('index'))
    try:
        time_slot = time_to_slot(selected_time)
    except InvalidSlotError:
        return redirect(url_for('index'))

    available_seats = manager.seats_for_slot(selected_date, selected_time)
    if available_seats <= 0:
        app.logger.info(f"Slot {selected_date} {selected_time} ist ausgebucht.")
        return redirect(url_for('index'))

    return render_template(
        'reservation_form.html',
        selected_date=selected_date,
        display_date=format_date_long(selected_date, lang, texts['weekdays']),
        selected_time=selected_time,
        time_slot=time_slot,
        party_sizes=list(range(1, min(MAX_CAPACITY, available_seats) + 1))
    )


@app.route('/api/reservierung', methods=['POST'])
def api_create_reservation():
    texts = current_texts()
    data = request.get_json(silent=True) or {}
    try:
        reservation, sms_status = manager.create_reservation(data)
    except ReservationValidationError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    except BackendError as e:
        return backend_error_response(e)
    except Exception as e:
        app.logger.error(f"Fehler beim Erstellen: {e}", exc_info=True)
        return jsonify({"success": False, "message": texts['server_error']}), 500

    return jsonify({
        "success": True,
        "message": texts['reserved'],
        "reservation": reservation.to_dict(),
        "sms": sms_status,
        "redirect_url": url_for('index')
    })


@app.route('/meine_reservierungen', methods=['GET'])
def manage_reservations_page():
    return render_template('manage.html')


@app.route('/api/reservierungen_suchen', methods=['POST'])
def api_search_reservations():
    texts = current_texts()
    lang = session.get('language', DEFAULT_LANGUAGE)
    data = request.get_json(silent=True) or {}
    try:
        reservations = manager.find_reservations_by_phone(data.get('phone'))
    except ReservationValidationError:
        return jsonify({"success": False, "message": texts['phone_required']}), 400
    except BackendError as e:
        if e.status_code == 400:
            return jsonify({"success": False, "message": texts['phone_required']}), 400
        return backend_error_response(e)

    return jsonify({
        "success": True,
        "reservations": [reservation_for_display(r, texts, lang) for r in reservations]
    })


@app.route('/api/reservierung_loeschen/<string:reservation_id>', methods=['DELETE'])
def api_delete_reservation(reservation_id):
    texts = current_texts()
    try:
        manager.delete_reservation(reservation_id)
    except BackendError as e:
        return backend_error_response(e)
    return jsonify({"success": True, "message": texts['deleted']})


@app.route('/admin/login', methods=['GET', 'POST'])
def admin_login():
    texts = current_texts()
    error = None
    if request.method == 'POST':
        password = request.form.get('password', '')
        try:
            if manager.admin_login(password):
                session['admin_logged_in'] = True
                # Das Backend verlangt das Passwort bei jedem Admin-Aufruf
                session['admin_password'] = password
                app.logger.info("Admin hat sich angemeldet.")
                return redirect(url_for('admin_dashboard'))
            error = texts['login_failed']
            app.logger.warning("Fehlgeschlagener Admin-Login-Versuch.")
        except BackendError as e:
            app.logger.error(f"Admin-Login nicht möglich: {e}")
            error = texts['server_error']

    return render_template('admin_login.html', error=error)


@app.route('/admin/logout')
def admin_logout():
    session.pop('admin_logged_in', None)
    session.pop('admin_password', None)
    return redirect(url_for('index'))


def default_admin_date(dates):
    if not dates:
        return None
    today_str = datetime.date.today().strftime("%Y-%m-%d")
    return today_str if today_str in dates else dates[0]


@app.route('/admin')
def admin_dashboard():
    texts = current_texts()
    lang = session.get('language', DEFAULT_LANGUAGE)
    dates = config.generate_date_range()
    selected_date = request.args.get('date', '')
    if selected_date not in dates:
        selected_date = default_admin_date(dates)

    password = session.get('admin_password', '')
    summary = None
    reservations = []
    error = None
    try:
        summary = manager.admin_summary(password, selected_date)
        reservations = manager.admin_reservations(password, selected_date)
    except BackendError as e:
        if e.status_code in (401, 403):
            return redirect(url_for('admin_logout'))
        app.logger.error(f"Admin-Daten für {selected_date} konnten nicht geladen werden: {e}")
        error = texts['server_error']

    return render_template(
        'admin.html',
        dates=[{'value': d, 'label': format_date_long(d, lang, texts['weekdays'])} for d in dates],
        selected_date=selected_date,
        summary=summary,
        reservations=[reservation_for_display(r, texts, lang) for r in reservations],
        error=error
    )


@app.route('/api/admin/reservierung_loeschen/<string:reservation_id>', methods=['DELETE'])
def api_admin_delete_reservation(reservation_id):
    texts = current_texts()
    try:
        manager.admin_delete_reservation(session.get('admin_password', ''), reservation_id)
    except BackendError as e:
        return backend_error_response(e)
    return jsonify({"success": True, "message": texts['deleted']})


if __name__ == '__main__':
    app.run(debug=False, host=config.SERVER_HOST, port=config.SERVER_PORT)
