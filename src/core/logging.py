import sys
import structlog
import logging
from src.core.config import settings

def add_service_context(logger, method_name, event_dict):
    """
    Stamps every event with the service name and version so engine logs can
    be told apart once shipped next to other services.
    """
    event_dict.setdefault("service", settings.PROJECT_NAME)
    event_dict.setdefault("version", settings.PROJECT_VERSION)
    return event_dict

def get_engine_logger(engine: str):
    """
    Logger pre-bound with the rule engine that emits the events.
    Stays lazy, so module-level loggers still pick up setup_logging().
    """
    return structlog.get_logger(engine=engine)

def setup_logging():
    """
    Configures structlog to output JSON in Production and
    colored strings in Development.
    """

    # Shared processors (add timestamp, log level, callsite)
    shared_processors = [
        structlog.contextvars.merge_contextvars, # request_id bound by the HTTP middleware
        structlog.processors.add_log_level,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
    ]

    if settings.ENVIRONMENT == "production":
        # PROD: Flat JSON for log shipping
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # DEV: Human readable
        processors = shared_processors + [
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ]

    level = logging.DEBUG if settings.DEBUG else logging.INFO

    structlog.configure(
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    # Uvicorn and friends still log through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    def handle_exception(exc_type, exc_value, exc_traceback):
        """
        Global exception handler to ensure crashes go through structlog
        """
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        root_logger = structlog.get_logger()
        root_logger.critical(
            "uncaught_exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception
