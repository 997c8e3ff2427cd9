from .sequence_counter import SequenceCounter as SequenceCounter
