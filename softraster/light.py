"""Light sources and their contribution to a surface point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .color import Material
from .vec import Vec3, reflection


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division giving inf or nan instead of raising on zero."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _power(base: float, exponent: float) -> float:
    if math.isnan(base) or (base < 0 and not float(exponent).is_integer()):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def _specular_coeff(
    material: Material, light_direction: Vec3, target_direction: Vec3, normal: Vec3
) -> float:
    specular = material.specular
    if specular <= 0:
        return 0.0
    reflected = reflection(light_direction, normal)
    coeff = _ratio(reflected.dot(target_direction), reflected.norm() * target_direction.norm())
    return _power(coeff, specular)


class Light(ABC):
    """A light source with an intensity."""

    def __init__(self, intensity: float) -> None:
        self._intensity = intensity

    @property
    def intensity(self) -> float:
        return self._intensity

    @abstractmethod
    def diffuse(self, direction: Vec3, normal: Vec3) -> float:
        """Diffuse contribution for light travelling along direction."""

    @abstractmethod
    def lighting_coeff(
        self, material: Material, position: Vec3, camera_position: Vec3, normal: Vec3
    ) -> float:
        """Total contribution at a surface point seen from the camera."""


class AmbientLight(Light):
    """Light reaching every point equally."""

    def diffuse(self, direction: Vec3, normal: Vec3) -> float:
        return self._intensity

    def lighting_coeff(
        self, material: Material, position: Vec3, camera_position: Vec3, normal: Vec3
    ) -> float:
        return self.diffuse(position, normal)


class PointLight(Light):
    """Light shining from a point in every direction."""

    def __init__(self, intensity: float, position: Vec3) -> None:
        super().__init__(intensity)
        self._position = position

    @property
    def position(self) -> Vec3:
        return self._position

    def diffuse(self, direction: Vec3, normal: Vec3) -> float:
        coeff = _ratio((direction * -1).dot(normal), normal.norm() * direction.norm())
        return self._intensity * coeff

    def specular(self, material: Material, direction: Vec3, target: Vec3, normal: Vec3) -> float:
        return self._intensity * _specular_coeff(material, direction, target, normal)

    def lighting_coeff(
        self, material: Material, position: Vec3, camera_position: Vec3, normal: Vec3
    ) -> float:
        light_to_position = position - self._position
        return self.diffuse(light_to_position, normal) + self.specular(
            material, light_to_position, camera_position - position, normal
        )


class DirectionalLight(Light):
    """Parallel light travelling in one direction."""

    def __init__(self, intensity: float, direction: Vec3) -> None:
        super().__init__(intensity)
        self._direction = direction

    @property
    def direction(self) -> Vec3:
        return self._direction

    def diffuse(self, direction: Vec3, normal: Vec3) -> float:
        """The light's own direction is used; the argument is ignored."""
        coeff = _ratio(
            (self._direction * -1).dot(normal), normal.norm() * self._direction.norm()
        )
        return self._intensity * coeff

    def specular(self, material: Material, target_direction: Vec3, normal: Vec3) -> float:
        return self._intensity * _specular_coeff(
            material, self._direction, target_direction, normal
        )

    def lighting_coeff(
        self, material: Material, position: Vec3, camera_position: Vec3, normal: Vec3
    ) -> float:
        return self.diffuse(self._direction, normal) + self.specular(
            material, camera_position - position, normal
        )