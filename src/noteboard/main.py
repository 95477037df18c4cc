"""Application entry point for the Noteboard server."""

from noteboard.app import App
from noteboard.config import Config
from noteboard.logging import setup_logging
from noteboard.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
