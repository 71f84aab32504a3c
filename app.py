from json_key_filter.config import configure_logging, load_config
from json_key_filter.ui import build_demo

demo = build_demo()

if __name__ == "__main__":
    config = load_config()
    configure_logging(config.log_level)
    demo.launch(server_name=config.server_name, server_port=config.server_port)
