RESULTS_DIR = "test-results"


def results_dir(config):
    """Папка test-results в корне проекта (создаётся при необходимости)."""
    path = config.rootpath / RESULTS_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path
