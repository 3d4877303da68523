# pipeline/hooks.py


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def extracted(self, **_):
        pass

    def collapsed(self, **_):
        pass

    def noded(self, **_):
        pass

    def repaired(self, **_):
        pass

    def error(self, **_):
        pass
