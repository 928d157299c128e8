from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from devsync.core.config import settings
from devsync.core.http_hardening import install_error_handlers, install_http_hardening
from devsync.api.router import router as api_router

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_http_hardening(app)
install_error_handlers(app)

app.include_router(api_router, prefix="/api")

@app.get("/health")
def health():
    return {"status": "ok"}
