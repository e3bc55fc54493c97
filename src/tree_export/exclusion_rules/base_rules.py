from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, from the bare name of a directory entry, whether the
    entry should be left out of the rendered tree. Rules never see full paths, so
    the same rule behaves identically at every depth of the tree.

    Example:
        >>> from tree_export.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(["*.pyc"])
        >>> rules.add_rule("build")
        >>> rules.exclude("module.pyc")
        True
        >>> rules.exclude("module.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The bare name of a directory entry, without any path
                components.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.

        Example:
            >>> class HiddenExclusionRules(BaseExclusionRules):
            ...     def exclude(self, name: str) -> bool:
            ...         return name.startswith(".")
            >>> rules = HiddenExclusionRules()
            >>> rules.exclude(".git")
            True
            >>> rules.exclude("src")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are configured entirely at construction time use this
        default implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add, in the format of the concrete
                implementation (e.g., a glob pattern like "*.log").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
