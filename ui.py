from config import ApplicationConfig
from invoice_tracker.api.app import configure_logging
from invoice_tracker.ui.app import create_dash_app

configure_logging(ApplicationConfig.LOG_LEVEL)

app = create_dash_app(ApplicationConfig)
server = app.server

if __name__ == "__main__":
    app.run(
        host=ApplicationConfig.UI_HOST,
        port=ApplicationConfig.UI_PORT,
        debug=ApplicationConfig.UI_DEBUG,
    )
