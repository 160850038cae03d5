# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

from enum import Enum


class FetchErrorKind(str, Enum):
    NoSuchSection = 'No such configuration section'
    NoSuchOption = 'No such configuration option'
    DuplicateSection = 'Section already exists'
    InterpolationError = 'Interpolation into option failed'
    InterpolationCircularity = 'Interpolation is infinitely recursive'
    InvalidLiteral = 'Value cannot be parsed into desired type'


class FetchError(Exception):
    """Base of every error raised while fetching or editing options.

    `kind` tells what went wrong, `detail` (may be `None`) tells where.
    """
    kind: FetchErrorKind

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def description(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        if self.detail is None:
            return self.description
        return f'{self.description} ({self.detail})'


# KeyError, so that Mapping helpers (`in`, `.get()`) keep working.
class NoSuchSection(FetchError, KeyError):
    kind = FetchErrorKind.NoSuchSection


class NoSuchOption(FetchError, KeyError):
    kind = FetchErrorKind.NoSuchOption


class DuplicateSection(FetchError):
    kind = FetchErrorKind.DuplicateSection


class InterpolationError(FetchError):
    kind = FetchErrorKind.InterpolationError


class InterpolationCircularity(InterpolationError):
    kind = FetchErrorKind.InterpolationCircularity


class InvalidLiteral(FetchError, ValueError):
    kind = FetchErrorKind.InvalidLiteral
