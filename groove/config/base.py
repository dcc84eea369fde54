"""
基础配置文件。
包含所有环境共用的Django配置。
"""
from pathlib import Path

# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent

INSTALLED_APPS = [
    'core',
    'accounts',
]

USE_I18N = True
USE_TZ = True

# 领域模块默认配置
DOMAIN_SETTINGS = {
    'TYPE_RESOLVER': None,
    'MIN_PASSWORD_LENGTH': 6,
}
