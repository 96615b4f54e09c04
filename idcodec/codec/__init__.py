"""idcodec.codec — bit-field packing and the composed identity codec."""

from idcodec.codec.bitfield import FORMAT_VERSION as FORMAT_VERSION
from idcodec.codec.bitfield import pack as pack
from idcodec.codec.bitfield import to_signed_int64 as to_signed_int64
from idcodec.codec.bitfield import to_unsigned_int64 as to_unsigned_int64
from idcodec.codec.bitfield import unpack as unpack
from idcodec.codec.composer import IdentityCodec as IdentityCodec
from idcodec.codec.composer import aes_ctr_codec as aes_ctr_codec
from idcodec.codec.composer import plain_codec as plain_codec
from idcodec.codec.composer import speck64_codec as speck64_codec
from idcodec.codec.composer import xor_codec as xor_codec
