"""
===================================================================================
FAILURE_LOGGER - Журналирование упавших тестов
===================================================================================

pytest плагин, записывающий каждый упавший тест (включая ошибки в фикстурах
setup/teardown) в файл test-results/failed_tests_YYYYMMDD_HHMMSS.log.
Файл создаётся только при первом падении в прогоне.

ФОРМАТ ЗАПИСИ:
    ===== FAILED services/brands/test_brands.py::test_x [call] (0.42s) =====
    <текст ошибки pytest>
===================================================================================
"""

import logging
from datetime import datetime

from services.plugins.results_dir import results_dir

logger = logging.getLogger(__name__)


class FailureLogger:
    """
    АТРИБУТЫ:
        config: pytest.Config
        filename: str - Имя файла журнала текущего прогона
        count: int - Количество записанных падений
    """

    def __init__(self, config):
        self.config = config
        self.filename = f"failed_tests_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        self.count = 0

    @property
    def path(self):
        return results_dir(self.config) / self.filename

    def pytest_runtest_logreport(self, report):
        if not report.failed:
            return

        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"===== FAILED {report.nodeid} [{report.when}] ({report.duration:.2f}s) =====\n")
            f.write(report.longreprtext)
            f.write("\n\n")

        self.count += 1
        logger.info(f"Failure of {report.nodeid} written to {self.path}")

    def pytest_terminal_summary(self, terminalreporter):
        if self.count:
            terminalreporter.write_line(f"{self.count} failed test(s) logged to {self.path}")


def pytest_configure(config):
    config.pluginmanager.register(FailureLogger(config), "qa-failure-logger")
