from fastapi import FastAPI

# Routers
from wildrift.api.routers.patch import router as patch_router
from wildrift.api.routers.mappings import router as mappings_router


app = FastAPI(title="Wild Rift Patch Tracker", version="0.1")

app.include_router(patch_router)
app.include_router(mappings_router)
