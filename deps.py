"""Centralized imports for the entire project (app + diagnostic_annotator)."""

# Standard library
import os
import shutil
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    TextIO,
    Tuple,
)

# External
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, HTTPException
