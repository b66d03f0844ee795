"""
Docsearch API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from docsearch.server.deps import get_table
from docsearch.server.routes import search


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("Docsearch API Routes")
    print("=" * 60)
    
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))
    
    routes.sort(key=lambda r: (r[1], r[0]))
    
    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")
    
    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load up front so a malformed index stops the server from starting
    table = app.dependency_overrides.get(get_table, get_table)()
    print(f"Serving {len(table)} tokens from {table.source}")
    print_routes(app)
    yield


app = FastAPI(title="Docsearch API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search.router)


@app.get("/")
async def root():
    return {"name": "Docsearch API", "version": "0.1.0"}
