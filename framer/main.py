"""Точка входа в приложение."""
from framer.app import FramerApp
from framer.config import get_config
from framer.logging_setup import configure_logging


def main() -> None:
    """Создаёт и запускает главное окно приложения."""
    config = get_config()
    configure_logging(config.log_level)
    app = FramerApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
