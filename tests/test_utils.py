import json
import logging

from davinci_ballot.utils import (
    PerformanceMonitor,
    get_system_info,
    setup_logging,
)


class TestPerformanceMonitor:

    def test_empty_summary(self):
        summary = PerformanceMonitor().get_summary()
        assert summary['total_operations'] == 0
        assert summary['operations'] == {}

    def test_records_operations(self):
        monitor = PerformanceMonitor()
        for _ in range(3):
            with monitor.start_operation("hash"):
                sum(range(1000))
        with monitor.start_operation("encrypt"):
            pass

        summary = monitor.get_summary()
        assert summary['total_operations'] == 4
        assert summary['operations']['hash']['count'] == 3
        assert summary['operations']['encrypt']['count'] == 1
        assert summary['operations']['hash']['min_duration'] <= \
            summary['operations']['hash']['avg_duration'] <= \
            summary['operations']['hash']['max_duration']

    def test_records_failed_operation(self):
        monitor = PerformanceMonitor()
        try:
            with monitor.start_operation("failing"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert monitor.metrics[0].additional_data == {'exception': True}

    def test_save_metrics(self, tmp_path):
        monitor = PerformanceMonitor()
        with monitor.start_operation("op"):
            pass
        path = tmp_path / "metrics" / "metrics.json"
        monitor.save_metrics(path)
        data = json.loads(path.read_text())
        assert data['summary']['total_operations'] == 1
        assert len(data['metrics']) == 1

    def test_reset(self):
        monitor = PerformanceMonitor()
        with monitor.start_operation("op"):
            pass
        monitor.reset()
        assert monitor.metrics == []


class TestSystemInfo:

    def test_system_info(self):
        info = get_system_info()
        assert 'python_version' in info

    def test_benchmark_suite_reports_package_system_info(self):
        from benchmark_suite import BenchmarkSuite

        reported = BenchmarkSuite(trials=1).results['system_info']
        assert set(reported) == set(get_system_info())


class TestLogging:

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        setup_logging("DEBUG", log_file)
        logging.getLogger("davinci_ballot.test").debug("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)

    def test_setup_logging_uses_log_dir(self, tmp_path):
        setup_logging("INFO", log_dir=tmp_path / "engine_logs")
        logging.getLogger("davinci_ballot.test").info("into dir")
        root = logging.getLogger()
        for handler in root.handlers:
            handler.flush()
        log_files = list((tmp_path / "engine_logs").glob("ballot_engine_*.log"))
        assert len(log_files) == 1
        assert "into dir" in log_files[0].read_text()
        for handler in root.handlers[:]:
            handler.close()
            root.removeHandler(handler)
