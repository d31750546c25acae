# traveltide_features/core/processing/__init__.py

from .load_data import DataLoader, INPUT_TABLES
from .input_preparer import InputPreparer, REQUIRED_COLUMNS

__all__ = [

    # Loading data from postgresql or csv
    'DataLoader',
    'INPUT_TABLES',

    # Schema check and type coercion
    'InputPreparer',
    'REQUIRED_COLUMNS',

]
