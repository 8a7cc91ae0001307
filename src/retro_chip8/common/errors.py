"""
致命的エラーの定義。

起動時の前提条件違反とスタック規律違反のみが例外として扱われます。
未知のオペコードは例外ではなく、診断メッセージを出して実行を継続します。
"""

# @intent:responsibility プログラムイメージがロード領域（0x200-0xFFF）に収まらないことを表します。
class RomTooLargeError(ValueError):
    def __init__(self, size: int, capacity: int):
        super().__init__(f"Program image of {size} bytes exceeds available memory ({capacity} bytes).")
        self.size = size
        self.capacity = capacity

# @intent:responsibility 空のコールスタックに対してRETが実行されたことを表します。
class StackUnderflowError(IndexError):
    def __init__(self, pc: int):
        super().__init__(f"Return with empty call stack at PC {pc:#06x}.")
        self.pc = pc
