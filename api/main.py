from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, settings
from kebabs import router as kebabs_router
from songs import router as songs_router
from songs.catalog import SongCatalog
from songs.dependencies import ensure_ready

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the Mongo client and song state once per process.
    await db.init_client()
    await db.ensure_indexes()
    app.state.catalog = SongCatalog()
    try:
        yield
    finally:
        await db.close_client()


app = FastAPI(lifespan=lifespan)

# Browsers from the site and local dev; requests without an Origin (curl,
# server-to-server) are not subject to CORS at all.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(songs_router.router, tags=["songs"], dependencies=[Depends(ensure_ready)])
app.include_router(kebabs_router.router, tags=["kebabs"], dependencies=[Depends(ensure_ready)])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "kebab-songs api"}
