"""Handlers module - Log destinations"""

from logfacade.handlers.base_handler import BaseHandler
from logfacade.handlers.text_stream_handler import TextStreamHandler
from logfacade.handlers.attributed_handler import AttributedStringHandler
from logfacade.handlers.file_handle_handler import FileHandleHandler, FileHandler, StdErrHandler
from logfacade.handlers.bridge_handler import StdlibBridgeHandler, install_bridge

__all__ = [
    "BaseHandler",
    "TextStreamHandler",
    "AttributedStringHandler",
    "FileHandleHandler",
    "FileHandler",
    "StdErrHandler",
    "StdlibBridgeHandler",
    "install_bridge",
]
