import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from enrollment.api.v1.wizard import router as wizard_router
from enrollment.core.config import settings
from enrollment.wiring.dependencies import get_delivery


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "session_id", "step", "category_id", "bundle_id", "currency",
            "attempt", "status", "reason", "error", "error_count",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Only close an adapter that was actually built
    if get_delivery.cache_info().currsize:
        delivery = get_delivery()
        aclose = getattr(delivery, "aclose", None)
        if aclose is not None:
            await aclose()


app = FastAPI(title=f"{settings.BRAND_NAME} Pricing & Application", version="1.0.0", lifespan=lifespan)

app.include_router(wizard_router, prefix="/api/v1", tags=["wizard"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
