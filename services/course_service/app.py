"""
ECA Course Service Application.
"""

from __future__ import annotations

from eca_service_libs.logging_utils import configure_service_logging, create_service_logger
from eca_service_libs.metrics_middleware import setup_metrics_middleware
from quart import Quart
from quart_dishka import QuartDishka

from services.course_service import startup_setup
from services.course_service.api.course_routes import course_bp
from services.course_service.api.health_routes import health_bp
from services.course_service.config import settings

configure_service_logging(
    "course-service", environment=settings.ENVIRONMENT.value, log_level=settings.LOG_LEVEL
)
logger = create_service_logger("course_service.app")

app = Quart(__name__)

# Create DI container and setup QuartDishka integration before registering blueprints
_di_container = startup_setup.create_di_container()
QuartDishka(app=app, container=_di_container)


@app.before_serving
async def startup() -> None:
    """Initialize the database schema and middleware; the process must not serve on failure."""
    try:
        await startup_setup.initialize_services(app, settings, _di_container)
        setup_metrics_middleware(app, logger_name="course_service.metrics")
        logger.info("Course Service startup completed successfully")
    except Exception as e:
        logger.critical(f"Failed to start Course Service: {e}", exc_info=True)
        raise


@app.after_serving
async def shutdown() -> None:
    """Gracefully shutdown all services."""
    try:
        await startup_setup.shutdown_services()
        logger.info("Course Service shutdown completed")
    except Exception as e:
        logger.error(f"Error during service shutdown: {e}", exc_info=True)


app.register_blueprint(course_bp)
app.register_blueprint(health_bp)


if __name__ == "__main__":
    app.run(debug=settings.DEBUG, host=settings.HTTP_HOST, port=settings.HTTP_PORT)
