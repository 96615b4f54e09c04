"""idcodec.infra — cipher protocol and static configuration."""

from idcodec.infra.config import HIGH_PERFORMANCE as HIGH_PERFORMANCE
from idcodec.infra.config import HIGH_SECURITY as HIGH_SECURITY
from idcodec.infra.config import STANDARD as STANDARD
from idcodec.infra.config import SpeckParams as SpeckParams
from idcodec.infra.protocols import Cipher as Cipher
