pytest_plugins = ["easyevent.testing.fixtures"]
