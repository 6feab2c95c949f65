from pydantic import BaseModel, Field, ConfigDict

from kanatype.state import TransitionResult


class Score(BaseModel):
    score:     int = Field(0, ge=0)
    combo:     int = Field(0, ge=0)
    max_combo: int = Field(0, ge=0)
    hit:       int = Field(0, ge=0)  # keystrokes classified SUCCESS
    skipped:   int = Field(0, ge=0)  # keystrokes classified SKIPPED
    missed:    int = Field(0, ge=0)  # FAILED keystrokes plus kana left untyped
    finished:  int = Field(0, ge=0)  # lines completed before their time ran out
    kana:      int = Field(0, ge=0)  # kana completed
    model_config = ConfigDict(validate_assignment=True)


class TransitionEvent(BaseModel):
    key:    str = Field(..., min_length=1)
    kana:   str
    result: TransitionResult
    meta:   int = Field(..., ge=0)
    is_end: bool
    model_config = ConfigDict(extra="forbid")
