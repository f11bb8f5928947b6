import uvicorn
from sevenpro.config import get_settings

def run():
    settings = get_settings()
    uvicorn.run("sevenpro.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
