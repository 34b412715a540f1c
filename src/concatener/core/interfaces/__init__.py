from .decoding import TextDecoderProtocol
from .fs import FileCollectorProtocol, InputResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .progress import ProgressListenerProtocol

__all__ = [
    'TextDecoderProtocol',
    'FileCollectorProtocol',
    'InputResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ProgressListenerProtocol',
]
