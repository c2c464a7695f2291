from __future__ import annotations

from fastapi import FastAPI

from golf_wagers.api.settlements import router as settlements_router
from golf_wagers.api.stats import router as stats_router
from golf_wagers.storage import models  # noqa: F401
from golf_wagers.storage.database import Base, engine

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Golf Wagers API")
app.include_router(settlements_router)
app.include_router(stats_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
