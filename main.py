import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from database import BlogStore, connect
from schemas import BlogDraft, BlogPost, BlogUpdate

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def get_store(request: Request) -> BlogStore:
    db = request.app.state.db
    if db is None:
        raise HTTPException(status_code=500, detail="database not configured")
    return BlogStore(db)


def _summarize(errors: list) -> str:
    parts = []
    for err in errors:
        field = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        parts.append(f"{field}: {err.get('msg')}")
    return "; ".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    return JSONResponse(
        status_code=400,
        content={"detail": _summarize(errors), "errors": jsonable_encoder(errors)},
    )


async def persistence_exception_handler(request: Request, exc: PyMongoError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "database error"})


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the blog API around an already constructed database handle."""
    app = FastAPI()
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, persistence_exception_handler)

    @app.get("/")
    def read_root():
        return {"message": "Hello from the blog list API!"}

    @app.get("/test")
    def database_check():
        """Report whether the database is configured and reachable"""
        response = {
            "backend": "running",
            "database": "not configured",
            "database_name": None,
            "collections": [],
            "blogs": None,
        }
        if app.state.db is None:
            return response

        db = app.state.db
        response["database_name"] = db.name
        try:
            response["collections"] = db.list_collection_names()[:10]
            response["blogs"] = BlogStore(db).count()
            response["database"] = "connected"
        except PyMongoError as e:
            logger.warning("Database check failed: %s", e)
            response["database"] = f"error: {str(e)[:50]}"
        return response

    @app.get("/api/blogs", response_model=list[BlogPost])
    def list_blogs(store: BlogStore = Depends(get_store)):
        return store.find_all()

    @app.get("/api/blogs/{blog_id}", response_model=BlogPost)
    def get_blog(blog_id: str, store: BlogStore = Depends(get_store)):
        blog = store.find_by_id(blog_id)
        if blog is None:
            raise HTTPException(status_code=404, detail="blog not found")
        return blog

    @app.post("/api/blogs", response_model=BlogPost, status_code=201)
    def create_blog(payload: BlogDraft, store: BlogStore = Depends(get_store)):
        return store.create(payload)

    @app.put("/api/blogs/{blog_id}", response_model=BlogPost)
    def update_blog(blog_id: str, payload: BlogUpdate, store: BlogStore = Depends(get_store)):
        blog = store.update(blog_id, payload)
        if blog is None:
            raise HTTPException(status_code=404, detail="blog not found")
        return blog

    @app.delete("/api/blogs/{blog_id}", status_code=204)
    def delete_blog(blog_id: str, store: BlogStore = Depends(get_store)):
        store.delete_by_id(blog_id)
        return Response(status_code=204)

    return app


def app_from_env() -> FastAPI:
    database_url = os.getenv("DATABASE_URL")
    database_name = os.getenv("DATABASE_NAME", "bloglist")
    if not database_url:
        logger.warning("DATABASE_URL is not set; blog endpoints will fail")
        return create_app(None)
    logger.info("Connecting to database %s", database_name)
    return create_app(connect(database_url, database_name))


app = app_from_env()


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
