# api/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biblioteca.config import settings
from biblioteca.sa.database import get_database
from biblioteca.utils.log import get_logger
from api.routes import auth, authors, books, categories, loans

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create any missing tables on startup
    get_database().init_db()
    logger.info("Database schema ready")
    yield


app = FastAPI(title="Biblioteca API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(authors.router)
app.include_router(categories.router)
app.include_router(books.router)
app.include_router(loans.router)


@app.get("/")
async def root():
    return {"message": "Biblioteca API"}


# Main execution
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        reload_dirs=["api", "biblioteca"]
    )
