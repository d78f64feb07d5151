"""Abstract base class for URL registry storage implementations."""

from abc import ABC, abstractmethod

from .models import RegistrySnapshot


class URLStorageBase(ABC):
    """Abstract base class for loading and saving a registry snapshot.
    
    Implementations read and write the whole snapshot at once. Neither
    operation raises: failures are logged and reported through the
    return value so the registry keeps running on its in-memory state.
    """
    
    def __init__(self, location: str):
        """Initialize storage.
        
        Args:
            location: Storage location (e.g. a file path)
        """
        self.location = location
    
    @abstractmethod
    def load(self) -> RegistrySnapshot:
        """Load the persisted snapshot.
        
        Returns:
            The stored snapshot, or an empty snapshot if nothing usable is stored
        """
        pass
    
    @abstractmethod
    def save(self, snapshot: RegistrySnapshot) -> bool:
        """Replace the persisted snapshot.
        
        Args:
            snapshot: Complete registry state to write
            
        Returns:
            True if written, False if the write failed
        """
        pass
