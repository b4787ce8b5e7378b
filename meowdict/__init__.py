"""meowdict - command-line client for the moedict.tw dictionary.

Usage:
    meowdict 字典
    meowdict -i -r 汉字
    meowdict --translation 貓
    meowdict --console
"""

__version__ = "0.1.0"
