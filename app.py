"""Development entrypoint: ``python app.py`` or ``flask --app app run``."""

from src.pharmacy_payroll.pharmacy_payroll.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=bool(app.config.get("DEBUG")))
