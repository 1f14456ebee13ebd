from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promptlab.core.config import CORS_ORIGINS, LOG_LEVEL
from promptlab.core.errors import register_exception_handlers
from promptlab.core.logging_setup import configure_logging
from promptlab.db.init_db import init_db
from promptlab.db.session import engine
from promptlab.api.tests import router as test_router
from promptlab.api.model_tests import router as model_test_router
from promptlab.api.messages import router as message_router
from promptlab.api.generate import router as generate_router
from promptlab.api.keys import router as key_router
from promptlab.api.models import router as model_router

configure_logging(LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Ensure tables are created
    await init_db(engine)
    yield
    await engine.dispose()


app = FastAPI(title="PromptLab Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(test_router)
app.include_router(model_test_router)
app.include_router(message_router)
app.include_router(generate_router)
app.include_router(key_router)
app.include_router(model_router)

@app.get("/")
def root():
    return {"status": "PromptLab backend running"}
