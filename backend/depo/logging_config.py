import logging.config


def configure_logging(level: str = "INFO") -> None:
    """
    Konfiguruje loggery aplikacji (drzewo "depo") z wyjsciem na konsole.

    Args:
        level: Poziom logowania, np. "INFO" albo "DEBUG".
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "[{asctime}] {levelname} {name} {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
            },
        },
        "loggers": {
            "depo": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    })
