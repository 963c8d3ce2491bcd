# backend/projectplan/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .database import engine
from . import models
from .api import projects, todos, tools

# Create the key-value table on startup
models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="Project Plan API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projects.router)
app.include_router(todos.router)
app.include_router(tools.router)

@app.get("/")
async def root():
    return {"message": "Project Plan API is running"}
