DEFAULT_LANGUAGE = 'ja'

TRANSLATIONS = {
    'ja': {
        'title': '義田鮨予約フォーム',
        'business_hours': '営業時間: 18:00-28:00',
        'manage': '予約管理',
        'available': '空席',
        'full': '満席',
        'calendar': '予約カレンダー',
        'calendar_hint': '空席をタップして予約してください',
        'time': '時間',
        'seats_left': '残',
        'confirm_title': '予約確認',
        'name': 'お名前',
        'phone': '電話番号',
        'party_size': '人数',
        'persons_suffix': '名',
        'cancel': 'キャンセル',
        'reserve': '予約する',
        'reserved': '予約が完了しました！',
        'reserve_failed': '予約に失敗しました',
        'notice_title': '【ご予約前にご確認ください】',
        'notice_text': 'プレオープン期間中は、店舗の雰囲気や様子を撮影するため、店内にカメラが入る可能性があります。撮影した映像・写真は、SNSやYouTube、今後の広報活動等に使用させていただく可能性がございます。',
        'notice_optout': '※映りたくない方は、当日スタッフまでお気軽にお声かけください。できる限り配慮させていただきます。',
        'manage_hint': '電話番号で認証してあなたの予約を確認',
        'phone_auth': '電話番号（認証用）',
        'search': '認証して予約を確認',
        'phone_required': '電話番号を入力してください',
        'security_note': 'セキュリティのため、登録した電話番号での認証が必要です',
        'no_reservations': '予約が見つかりませんでした',
        'reservation_id': '予約ID',
        'delete': '削除',
        'delete_confirm': 'この予約を削除しますか？',
        'deleted': '予約が削除されました',
        'delete_failed': '削除に失敗しました',
        'other_number': '別の番号で認証',
        'admin': '管理者',
        'admin_login': '管理者ログイン',
        'admin_password': '管理者パスワードを入力',
        'login': 'ログイン',
        'logout': 'ログアウト',
        'login_failed': 'ログインに失敗しました',
        'server_error': 'サーバーエラーが発生しました',
        'dashboard': '管理者ダッシュボード',
        'total_reservations': '予約数',
        'total_guests': '来店人数',
        'occupancy': '稼働率',
        'hourly_occupancy': '時間帯別の稼働状況',
        'reservation_list': '予約一覧',
        'no_reservations_for_date': '選択した日付に予約はありません',
        'status_CONFIRMED': '確定',
        'status_CANCELLED': 'キャンセル済み',
        'status_NO_SHOW': '無断キャンセル',
        'status_COMPLETED': '来店済み',
        'weekdays': ['月', '火', '水', '木', '金', '土', '日'],
    },
    'en': {
        'title': 'Yoshida Sushi Reservations',
        'business_hours': 'Opening hours: 18:00-28:00',
        'manage': 'My reservations',
        'available': 'Available',
        'full': 'Full',
        'calendar': 'Reservation calendar',
        'calendar_hint': 'Tap a free slot to book',
        'time': 'Time',
        'seats_left': 'Left ',
        'confirm_title': 'Confirm reservation',
        'name': 'Name',
        'phone': 'Phone number',
        'party_size': 'Guests',
        'persons_suffix': '',
        'cancel': 'Cancel',
        'reserve': 'Reserve',
        'reserved': 'Your reservation is confirmed!',
        'reserve_failed': 'Reservation failed',
        'notice_title': 'Please read before booking',
        'notice_text': 'During the pre-opening period cameras may be filming inside the restaurant. Footage may be used on social media, YouTube and in future promotion.',
        'notice_optout': 'If you prefer not to appear, please tell our staff on the day.',
        'manage_hint': 'Verify with your phone number to see your reservations',
        'phone_auth': 'Phone number (verification)',
        'search': 'Show my reservations',
        'phone_required': 'Please enter your phone number',
        'security_note': 'For security, the phone number used for booking is required',
        'no_reservations': 'No reservations found',
        'reservation_id': 'Reservation ID',
        'delete': 'Delete',
        'delete_confirm': 'Delete this reservation?',
        'deleted': 'Reservation deleted',
        'delete_failed': 'Delete failed',
        'other_number': 'Use another number',
        'admin': 'Admin',
        'admin_login': 'Admin login',
        'admin_password': 'Admin password',
        'login': 'Log in',
        'logout': 'Log out',
        'login_failed': 'Login failed',
        'server_error': 'A server error occurred',
        'dashboard': 'Admin dashboard',
        'total_reservations': 'Reservations',
        'total_guests': 'Guests',
        'occupancy': 'Occupancy',
        'hourly_occupancy': 'Occupancy by time',
        'reservation_list': 'Reservations',
        'no_reservations_for_date': 'No reservations on the selected date',
        'status_CONFIRMED': 'Confirmed',
        'status_CANCELLED': 'Cancelled',
        'status_NO_SHOW': 'No show',
        'status_COMPLETED': 'Completed',
        'weekdays': ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'],
    },
    'de': {
        'title': 'Yoshida Sushi Reservierung',
        'business_hours': 'Öffnungszeiten: 18:00-28:00',
        'manage': 'Meine Reservierungen',
        'available': 'Frei',
        'full': 'Ausgebucht',
        'calendar': 'Reservierungskalender',
        'calendar_hint': 'Freien Slot antippen, um zu reservieren',
        'time': 'Zeit',
        'seats_left': 'Frei ',
        'confirm_title': 'Reservierung bestätigen',
        'name': 'Name',
        'phone': 'Telefonnummer',
        'party_size': 'Personen',
        'persons_suffix': '',
        'cancel': 'Abbrechen',
        'reserve': 'Reservieren',
        'reserved': 'Reservierung erfolgreich!',
        'reserve_failed': 'Reservierung fehlgeschlagen',
        'notice_title': 'Bitte vor der Reservierung lesen',
        'notice_text': 'Während der Pre-Opening-Phase wird im Restaurant eventuell gefilmt. Aufnahmen können in sozialen Medien, auf YouTube und für künftige Werbung verwendet werden.',
        'notice_optout': 'Wer nicht gefilmt werden möchte, sagt bitte am Tag selbst dem Personal Bescheid.',
        'manage_hint': 'Mit der Telefonnummer anmelden, um die eigenen Reservierungen zu sehen',
        'phone_auth': 'Telefonnummer (Anmeldung)',
        'search': 'Reservierungen anzeigen',
        'phone_required': 'Bitte Telefonnummer eingeben',
        'security_note': 'Aus Sicherheitsgründen ist die bei der Buchung angegebene Nummer nötig',
        'no_reservations': 'Keine Reservierungen gefunden',
        'reservation_id': 'Reservierungs-ID',
        'delete': 'Löschen',
        'delete_confirm': 'Diese Reservierung löschen?',
        'deleted': 'Reservierung gelöscht',
        'delete_failed': 'Löschen fehlgeschlagen',
        'other_number': 'Andere Nummer verwenden',
        'admin': 'Admin',
        'admin_login': 'Admin-Anmeldung',
        'admin_password': 'Admin-Passwort',
        'login': 'Anmelden',
        'logout': 'Abmelden',
        'login_failed': 'Anmeldung fehlgeschlagen',
        'server_error': 'Serverfehler',
        'dashboard': 'Admin-Übersicht',
        'total_reservations': 'Reservierungen',
        'total_guests': 'Gäste',
        'occupancy': 'Auslastung',
        'hourly_occupancy': 'Auslastung nach Uhrzeit',
        'reservation_list': 'Reservierungen',
        'no_reservations_for_date': 'Keine Reservierungen am gewählten Tag',
        'status_CONFIRMED': 'Bestätigt',
        'status_CANCELLED': 'Storniert',
        'status_NO_SHOW': 'Nicht erschienen',
        'status_COMPLETED': 'Abgeschlossen',
        'weekdays': ['Mo', 'Di', 'Mi', 'Do', 'Fr', 'Sa', 'So'],
    },
}
