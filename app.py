import importlib

from dotenv import load_dotenv

from config import get_settings_module
from src.employee_api.employee_api.main import create_app

load_dotenv(override=False)

app = create_app()


if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host=settings.HOST, port=settings.PORT, debug=bool(settings.DEBUG), threaded=True)
