from hostdetail.app import app, PORT
from hostdetail.util.log import log_debug, log_info


def main():
    for rule in app.url_map.iter_rules():
        if rule.endpoint != "static":
            log_debug(f"[HTTP] Route {rule.rule}")
    log_info(f"[HTTP] Flask server starting on port {PORT}")
    app.run(port=PORT)


if __name__ == "__main__":
    main()
