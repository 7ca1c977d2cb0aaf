import sys
from core.app_config import ServerConfig, validate_config, invalid_settings
from core.logger_config import logger
from agent_tools.mcp_client import mcp_server

def check_config() -> bool:
    # Missing credentials and malformed settings are fatal before any tool call is accepted
    missing = validate_config()
    for key in missing:
        logger.error(f"Missing required environment variable: {key}. "
                     f"Get your API key at: {ServerConfig.API_KEY_URL}")
    invalid = invalid_settings()
    for key in invalid:
        logger.error(f"Invalid value for {key}: expected a positive number of seconds")
    return not missing and not invalid

def main():
    if not check_config():
        sys.exit(1)

    try:
        logger.info(f"{ServerConfig.NAME} server running on stdio")
        mcp_server.run(transport="stdio", show_banner=False)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

# To run this file: python app.py (or the mcp-nano-banana console script)
if __name__ == '__main__':
    main()
