"""idcodec.cipher — 64-bit block ciphers implementing the Cipher protocol."""

from idcodec.cipher.aes_ctr import AesCtrCipher as AesCtrCipher
from idcodec.cipher.speck import Speck64Cipher as Speck64Cipher
from idcodec.cipher.xor import XorCipher as XorCipher
