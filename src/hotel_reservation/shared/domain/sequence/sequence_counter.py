import threading


class SequenceCounter:
    """連番カウンタ

    - 1 から始まり、単調増加し、値を再利用しない
    - next() は取得とインクリメントを排他的に行う
    - プロセス全体ではなく、生成したコンテキスト（Lambda コンテナ、テスト）ごとに保持する
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Counter start cannot be negative")
        self._last = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """次の連番を払い出す"""
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last(self) -> int:
        """最後に払い出した連番（未払い出しなら開始値）"""
        return self._last
