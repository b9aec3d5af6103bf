from lark.exceptions import LarkError, VisitError
from lark.visitors import Transformer
from .parser import parser
from .errors import InputFormatError
from .samples import ShareEntry, ShareInput, parse_count


class ShareTextConverter(Transformer):
    def start(self, children):
        # children: [required_count, ShareEntry, ShareEntry, ...]
        required_count, *entries = children
        return ShareInput(required_count=required_count, entries=tuple(entries))

    def required(self, children):
        return parse_count(str(children[0]), "k")

    def share(self, children):
        # children: [INT, VALUE, INT]
        key, value, base = (str(child) for child in children)
        return ShareEntry(key=key, x=int(key), encoded_value=value, base=int(base))


def parse_share_text(text: str) -> ShareInput:
    """
    Parse the compact share text (e.g "k=2 1:4/10 2:111/2") into a ShareInput.
    Raises InputFormatError if the text does not follow the grammar.
    """
    try:
        parse_tree = parser.parse(text)
    except LarkError as e:
        raise InputFormatError(f"could not parse share text: {e}") from e

    try:
        return ShareTextConverter().transform(parse_tree)
    except VisitError as e:
        # lark wraps errors raised inside the transformer callbacks
        raise e.orig_exc from e
