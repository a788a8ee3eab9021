"""Recording stand-ins for the Webflow client."""


class FakeWebflow:
    """Records calls and answers with canned sites or a canned error."""

    def __init__(self, site=None, sites=None, error=None):
        self.site = site
        self.sites = sites if sites is not None else []
        self.error = error
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def get_site(self, site_id):
        self.calls.append(("get_site", site_id))
        if self.error is not None:
            raise self.error
        return self.site

    def list_sites(self):
        self.calls.append(("list_sites",))
        if self.error is not None:
            raise self.error
        return self.sites


class FakeClientFactory:
    """Hands out the same FakeWebflow and counts how often it was asked."""

    def __init__(self, webflow):
        self.webflow = webflow
        self.created = 0

    def __call__(self):
        self.created += 1
        return self.webflow
