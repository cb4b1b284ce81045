import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_settings
from storefront.routers import products, dashboard, favorites

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Delta Electric Catalog API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event() -> None:
    from storefront.state import init_catalog
    init_catalog()


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Delta Electric Catalog API is running!"}


app.include_router(products.router)
app.include_router(dashboard.router)
app.include_router(favorites.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
