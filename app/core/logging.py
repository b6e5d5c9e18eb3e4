import logging


def setup_logging(level: str = "INFO") -> None:
    """Configura el logger raíz una sola vez (basicConfig no hace nada si ya hay handlers)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
