"""scikit-learn backed forest members.

Samples are row labels of a feature DataFrame and attributes are its column
names. Each member is a cloned estimator fitted on one row/column subset.
"""

from typing import Any, Dict, Hashable, Optional, Sequence
import pandas as pd
from sklearn.base import BaseEstimator, clone
from sklearn.tree import DecisionTreeClassifier


class SklearnMember:
    """A fitted scikit-learn classifier restricted to a column subset.
    
    Attributes:
        estimator: Fitted classifier exposing ``predict_proba`` and ``classes_``
        attrs: Column names the estimator was fitted on, in fit order
    
    Example:
        >>> member = SklearnMember(fitted_tree, ['age', 'bmi'])
        >>> member.classify({'age': 52, 'bmi': 31.2, 'glucose': 140})
        {0: 0.25, 1: 0.75}
    """
    
    def __init__(self, estimator: BaseEstimator, attrs: Sequence[Hashable]):
        self.estimator = estimator
        self.attrs = list(attrs)
    
    def classify(self, query: Any) -> Dict[Hashable, float]:
        """Predict class probabilities for one record.
        
        Args:
            query: pandas Series or mapping of column name -> value; columns
                outside ``attrs`` are ignored
            
        Returns:
            Dict mapping class label to probability
        """
        row = pd.DataFrame([[query[attr] for attr in self.attrs]], columns=self.attrs)
        probabilities = self.estimator.predict_proba(row)[0]
        return {
            label: float(p)
            for label, p in zip(self.estimator.classes_.tolist(), probabilities)
        }
    
    def __repr__(self) -> str:
        return f"SklearnMember({type(self.estimator).__name__}, attrs={self.attrs})"


def make_sklearn_trainer(
    X: pd.DataFrame,
    y: pd.Series,
    estimator: Optional[BaseEstimator] = None,
    random_state: Optional[int] = None
):
    """Create a trainer that fits a fresh estimator per member.
    
    Parameters
    ----------
    X : DataFrame
        Feature table. Its index labels are the sample pool and its columns
        are the attribute pool.
    y : Series
        Class labels aligned with ``X``'s index.
    estimator : BaseEstimator, optional
        Unfitted classifier to clone for each member. Defaults to a
        ``DecisionTreeClassifier``.
    random_state : int, optional
        Seed for the default decision tree. Ignored if ``estimator`` is given.
    
    Returns
    -------
    train_fn : callable
        ``train_fn(samples, attrs) -> SklearnMember``.
    
    Example:
        >>> train_fn = make_sklearn_trainer(X, y, random_state=42)
        >>> forest = build_forest(50, X.index, X.columns, 200, None, train_fn)
    """
    if estimator is None:
        estimator = DecisionTreeClassifier(random_state=random_state)
    
    def train_fn(samples: Sequence[Hashable], attrs: Sequence[Hashable]) -> SklearnMember:
        if len(attrs) == 0:
            raise ValueError("Cannot fit a classifier on an empty attribute subset")
        
        model = clone(estimator)
        model.fit(X.loc[list(samples), list(attrs)], y.loc[list(samples)])
        return SklearnMember(model, attrs)
    
    return train_fn

