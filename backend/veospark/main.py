from fastapi import FastAPI

from veospark.core.config import settings
from veospark.db import Base, engine
from veospark import models  # noqa: F401  (registers tables)
from veospark.api.routes import language, options, prompts, suggestions

# Create DB tables on startup (for dev; later replace with Alembic)
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)


app.include_router(prompts.router, prefix=settings.API_V1_PREFIX)
app.include_router(suggestions.router, prefix=settings.API_V1_PREFIX)
app.include_router(language.router, prefix=settings.API_V1_PREFIX)
app.include_router(options.router, prefix=settings.API_V1_PREFIX)
