import os
from pathlib import Path

from libb import Setting, expandabspath, get_tempdir

Setting.unlock()

# Environment
HERE = Path(Path(__file__).parent).resolve()

# Tmpdir
tmpdir = get_tempdir()

# Syslog
syslog = Setting()
syslog.host = os.getenv('CONFIG_SYSLOG_HOST')
syslog.port = int(os.getenv('CONFIG_SYSLOG_PORT', 0)) or None
syslog.socket = os.getenv('CONFIG_SYSLOG_SOCKET')
syslog.facility = os.getenv('CONFIG_SYSLOG_FACILITY', 'local1').lower()

# Log settings
log = Setting()
log.dir = tmpdir.dir
if os.getenv('CONFIG_LOG_DIR'):
    log.dir = expandabspath(os.getenv('CONFIG_LOG_DIR'))
log.level = os.getenv('CONFIG_LOG_LEVEL', 'debug').lower()
log.silencer = os.getenv('CONFIG_LOG_SILENCER', '1').lower() not in {'0', 'false', 'no'}

Setting.lock()
