import os
import sys
import logging
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from collision_insights.common.config import ConfigManager
from collision_insights.common.logging import set_log_level, setup_logger
from collision_insights.events.application.builder import EventsApplicationBuilder
from collision_insights.events.presentation.api import create_app

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    logger = setup_logger("run_server")
    logger.info("Configuration loaded.")

    service = EventsApplicationBuilder(cfg).build_service()
    set_log_level(getattr(logging, cfg.events.get('log_level', 'INFO')))
    app = create_app(service)

    server_cfg = ConfigManager.server_config(cfg)
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
