import logging
import sys

# Third-party loggers that log every request at INFO.
_CHATTY_LIBRARIES = ("httpx", "httpcore", "openai", "pdfminer")


class Log:
    """Pipeline logging facade.

    Records go to stderr so that analysis output on stdout stays clean.
    Third-party request logging is held at WARNING unless diagnostics are on.
    """

    _logger: logging.Logger = logging.getLogger("trapfinder")

    @classmethod
    def configure(cls, log_level: str, *, diagnostics: bool = False) -> None:
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)
        library_level = logging.DEBUG if diagnostics else logging.WARNING
        for name in _CHATTY_LIBRARIES:
            logging.getLogger(name).setLevel(library_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
