from ducklisp.reader.parser import tokenize, TokenStream, read

__all__ = ["tokenize", "TokenStream", "read"]
