import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from smart_traffic.control.application.builder import ControlApplicationBuilder
from smart_traffic.control.presentation.api import app, init_service

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    builder = ControlApplicationBuilder(cfg)
    scheduler = builder.build_all()
    components = builder.get_components()
    sensor_feed = components['sensor_feed']
    print("Configuration loaded.")

    init_service(components['loop'])

    @app.on_event("startup")
    async def startup_event():
        if sensor_feed:
            sensor_feed.start()
        scheduler.start()

    @app.on_event("shutdown")
    async def shutdown_event():
        scheduler.stop()
        if sensor_feed:
            sensor_feed.stop()

    server_cfg = builder.control_cfg.server
    print(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
