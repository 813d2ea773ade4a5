import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure le logging racine une seule fois (format commun à toute l'app)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn installe ses propres handlers, on aligne seulement le niveau
    logging.getLogger("app").setLevel(level.upper())
