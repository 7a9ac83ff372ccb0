from waitress import serve

from sushi_reservierung.app import app
from sushi_reservierung.core import config


def main():
    host = config.SERVER_HOST
    port = config.SERVER_PORT
    print(f"INFO: Starte Sushi-Reservierungsserver mit Waitress...")
    print(f"INFO: Programm läuft auf http://{host}:{port}")
    print(f"INFO: Backend: {config.API_BASE_URL}")
    serve(app, host=host, port=port, threads=config.SERVER_THREADS)


if __name__ == '__main__':
    main()
