"""Exception types raised by the merge pipeline."""


class PicmrgError(Exception):
	"""Base class for every error raised by picmrg."""


class NotFoundError(PicmrgError, FileNotFoundError):
	"""A path does not exist or is not the kind of entry expected."""


class AccessError(PicmrgError, PermissionError):
	"""The filesystem refused access to a path."""


class DecodeError(PicmrgError):
	"""A file has a supported extension but is not a readable image."""


class WriteError(PicmrgError):
	"""The merged image could not be encoded or written."""


EncodeError = WriteError


class FatalStartupError(PicmrgError):
	"""The root path is unusable, nothing can be processed."""
