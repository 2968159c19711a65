import uvicorn

from library_catalog.config import settings

if __name__ == "__main__":
    print(f"🚀 Starting catalog service on {settings.host}:{settings.port} (database: {settings.database_url})")
    uvicorn.run("library_catalog.main:app", host=settings.host, port=settings.port, reload=False)
