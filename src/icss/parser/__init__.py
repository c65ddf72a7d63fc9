from icss.parser.errors import ParseError
from icss.parser.transformer import IcssTransformer, parse_icss

__all__ = ["IcssTransformer", "ParseError", "parse_icss"]
