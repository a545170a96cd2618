def pytest_configure(config):
    config.addinivalue_line("markers", "pipeline: tests which build a full annotext Pipeline")
    config.addinivalue_line("markers", "travis: fast tests which run on every commit")
