from fastapi import APIRouter

from src.codepad.api.v1 import files, projects, system

# Unversioned URLs: the editor front end calls these paths directly
api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(projects.router)
api_router.include_router(files.router)
