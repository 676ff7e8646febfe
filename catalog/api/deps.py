# catalog/api/deps.py
from fastapi import Depends, Request
from catalog.db.mongo import MongoStore
from catalog.domain.repositories.product_repo import ProductRepo
from catalog.domain.repositories.review_repo import ReviewRepo

# The store is built once by the lifespan (or injected by tests) and lives on app.state
def get_store(request: Request) -> MongoStore:
    store = getattr(request.app.state, "store", None)
    assert store is not None, "Store not initialized"
    return store

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(store = Depends(get_store)):
    return store.db

def product_repo(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def review_repo(db = Depends(mongo_db)) -> ReviewRepo:
    return ReviewRepo(db)
