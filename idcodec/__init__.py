"""idcodec — compact 64-bit encoding of 18-character identity numbers.

    >>> from idcodec import plain_codec, unwrap
    >>> codec = plain_codec()
    >>> value = unwrap(codec.encode("11010519491231002X"))
    >>> unwrap(codec.decode_str(value))
    '11010519491231002X'
"""

from idcodec.codec.composer import IdentityCodec as IdentityCodec
from idcodec.codec.composer import aes_ctr_codec as aes_ctr_codec
from idcodec.codec.composer import plain_codec as plain_codec
from idcodec.codec.composer import speck64_codec as speck64_codec
from idcodec.codec.composer import xor_codec as xor_codec
from idcodec.core.errors import CodecError as CodecError
from idcodec.core.errors import ErrorKind as ErrorKind
from idcodec.core.identity import IdentityNumber as IdentityNumber
from idcodec.core.result import Err as Err
from idcodec.core.result import Ok as Ok
from idcodec.core.result import unwrap as unwrap

__version__ = "1.0.0"
