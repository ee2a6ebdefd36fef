import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import crud, schemas
from .config import get_settings
from .logging_config import setup_logging
from .recipes import load_recipes, seed_store


settings = get_settings()
setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The store lives exactly as long as the application
    store = crud.RecipeStore()
    if settings.seed_file:
        added = seed_store(store, load_recipes(settings.seed_file))
        logger.info("Seeded %d recipe(s) from %s", added, settings.seed_file)
    app.state.store = store
    yield
    logger.info("Shutting down with %d recipe(s) in memory", len(store))


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Starlette re-raises exc once this response is sent.
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500, content={"detail": "Internal Server Error"}
    )


def get_store(request: Request) -> crud.RecipeStore:
    return request.app.state.store


router = APIRouter(prefix=settings.api_prefix, tags=["recipes"])


@router.post("", response_model=schemas.Recipe)
def create_recipe(
    payload: schemas.RecipePayload,
    store: crud.RecipeStore = Depends(get_store),
):
    recipe = payload.root
    logger.info("POST %s - Creating new %s recipe", router.prefix, recipe.type)
    logger.debug("Recipe details: title=%s", recipe.title)
    db_recipe = store.create_recipe(recipe)
    logger.info("Created recipe with id=%s", db_recipe.id)
    return db_recipe


@router.get("", response_model=List[schemas.Recipe])
def list_recipes(store: crud.RecipeStore = Depends(get_store)):
    logger.info("GET %s - Retrieving all recipes", router.prefix)
    recipes = store.get_recipes()
    logger.info("Retrieved %d recipe(s)", len(recipes))
    return recipes


@router.get("/{recipe_id}", response_model=Optional[schemas.Recipe])
def get_recipe(recipe_id: int, store: crud.RecipeStore = Depends(get_store)):
    logger.info("GET %s/%s - Retrieving recipe", router.prefix, recipe_id)
    db_recipe = store.get_recipe(recipe_id)
    if db_recipe is None:
        logger.warning("Recipe not found with id=%s", recipe_id)
        return None
    return db_recipe


@router.put("/{recipe_id}", response_model=Optional[schemas.Recipe])
def update_recipe(
    recipe_id: int,
    recipe: schemas.RecipeUpdate,
    store: crud.RecipeStore = Depends(get_store),
):
    logger.info("PUT %s/%s - Updating recipe", router.prefix, recipe_id)
    logger.debug("Update details: title=%s", recipe.title)
    db_recipe = store.update_recipe(recipe_id, recipe)
    if db_recipe is None:
        logger.warning("Recipe not found for update with id=%s", recipe_id)
        return None
    logger.info("Updated recipe with id=%s", recipe_id)
    return db_recipe


@router.patch("/{recipe_id}", response_model=Optional[schemas.Recipe])
def patch_recipe(
    recipe_id: int,
    recipe: schemas.RecipeUpdate,
    store: crud.RecipeStore = Depends(get_store),
):
    logger.info(
        "PATCH %s/%s - Partially updating recipe", router.prefix, recipe_id
    )
    logger.debug("Patch details: title=%s", recipe.title)
    db_recipe = store.patch_recipe(recipe_id, recipe)
    if db_recipe is None:
        logger.warning("Recipe not found for patch with id=%s", recipe_id)
        return None
    logger.info("Patched recipe with id=%s", recipe_id)
    return db_recipe


@router.delete("/{recipe_id}", response_model=bool)
def delete_recipe(recipe_id: int, store: crud.RecipeStore = Depends(get_store)):
    logger.info("DELETE %s/%s - Deleting recipe", router.prefix, recipe_id)
    deleted = store.delete_recipe(recipe_id)
    if not deleted:
        logger.warning("Recipe not found for deletion with id=%s", recipe_id)
    else:
        logger.info("Deleted recipe with id=%s", recipe_id)
    return deleted


app.include_router(router)


@app.get("/health")
def health(store: crud.RecipeStore = Depends(get_store)):
    return {"status": "ok", "recipes": len(store)}
