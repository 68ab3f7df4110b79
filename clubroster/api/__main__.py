"""
Run the API with uvicorn.

    python -m clubroster.api
"""

import uvicorn

from clubroster.config.settings import settings


if __name__ == "__main__":
    uvicorn.run(
        "clubroster.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )
