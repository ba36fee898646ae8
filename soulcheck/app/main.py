import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, RedirectResponse

from .config import settings
from .ping import ping_host
from .report import run_health_checker, utc_timestamp
from .targets import ConfigError
from .ui import HTML as STATUS_HTML

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

APP_STORE_URL = "https://apps.apple.com/es/app/telegram-messenger/id686449807"
PLAY_STORE_URL = "https://play.google.com/store/apps/details?id=org.telegram.messenger&pcampaignid=web_share"
TELEGRAM_APPS_URL = "https://telegram.org/apps"

app = FastAPI(title="Soul:23")


@app.get("/health", response_class=JSONResponse)
async def health():
    """Liveness plus a single ping to the VPS."""
    alive = await ping_host(settings.VPS_IP)
    return {
        "status": "ok",
        "timestamp": utc_timestamp(),
        "checks": {
            "vps_ping": {
                "target": settings.VPS_IP,
                "alive": alive,
                "output": "VPS Reachable" if alive else "VPS Unreachable",
            }
        },
    }


@app.get("/healthchecker", response_class=JSONResponse)
async def healthchecker():
    try:
        return await run_health_checker()
    except ConfigError as e:
        logger.error(f"Health checker failed: {e}")
        return JSONResponse({"error": "Health checker failed", "details": str(e)}, status_code=500)


@app.get("/status", response_class=HTMLResponse)
def status_page():
    return HTMLResponse(STATUS_HTML)


def telegram_target(user_agent: str, platform: str = "") -> str:
    ua = user_agent.lower()
    platform = platform.lower()
    if platform == "ios" or any(k in ua for k in ("iphone", "ipad", "ipod", "ios")):
        return APP_STORE_URL
    if platform == "android" or "android" in ua:
        return PLAY_STORE_URL
    return TELEGRAM_APPS_URL


@app.get("/telegram")
def telegram(request: Request, platform: str = ""):
    """Send visitors to the Telegram download for their platform."""
    ua = request.headers.get("user-agent", "")
    logger.info(f"[/telegram] User-Agent: {ua}")
    return RedirectResponse(telegram_target(ua, platform), status_code=302)


def resolve_static(path: str) -> Path | None:
    root = Path(settings.STATIC_DIR).resolve()
    candidate = (root / path).resolve()
    if path and candidate.is_file() and candidate.is_relative_to(root):
        return candidate
    index = root / "index.html"
    return index if index.is_file() else None


@app.get("/{path:path}")
def static_files(path: str):
    found = resolve_static(path)
    if found is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(found)


def run():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
