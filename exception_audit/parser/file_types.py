from pathlib import Path
import enum

class FileTypes(enum.StrEnum):
    """Enum of source file types the analyzer can parse"""
    
    JAVA = "java"
    UNKNOWN = "UNKNOWN"
    
    @classmethod
    def from_path(cls, path: Path):
        match path.suffix:
            case ".java":
                return cls.JAVA
            case _:
                return cls.UNKNOWN
