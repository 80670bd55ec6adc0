class FeedError(Exception):
    """Base class for failures that abort a feed build."""


class FeedFetchError(FeedError):
    pass


class FeedParseError(FeedError):
    pass


class FeedWriteError(FeedError):
    pass
