from .fakes import FakeModel, SentMessages, FakeGenerator, make_settings

__all__ = ["FakeGenerator", "FakeModel", "SentMessages", "make_settings"]
