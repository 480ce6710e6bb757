import logging, os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(output_dir="output", level="INFO"):
    os.makedirs(output_dir, exist_ok=True)
    log_path = os.path.join(output_dir, "jirafield.log")
    # add only one file handler and one stream handler
    root = logging.getLogger()
    if not any(isinstance(h, logging.FileHandler) for h in root.handlers):
        fh = logging.FileHandler(log_path)
        fh.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(fh)
    # FileHandler subclasses StreamHandler
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(ch)
    root.setLevel(level)
    return log_path
