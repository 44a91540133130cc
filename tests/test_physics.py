import math

import pytest

from sphdisc.parameters import Parameters
from sphdisc.particle import Particle
from sphdisc.physics import (
    apply_boundary,
    central_gravity,
    compute_acceleration,
    compute_density,
    handle_boundary_conditions,
    integrate,
)
from sphdisc.vec3 import Vec3


@pytest.fixture
def params():
    return Parameters(particle_count=0)


def test_density_without_neighbors_is_zero(params):
    particle = Particle(density=5.0)
    assert compute_density(particle, [], params) == []
    assert particle.density == 0.0


def test_density_ignores_self(params):
    particle = Particle(position=Vec3(1.0, 1.0, 1.0))
    compute_density(particle, [particle], params)
    assert particle.density == 0.0


def test_density_returns_distances(params):
    particle = Particle(position=Vec3(1.0, 1.0, 1.0))
    neighbor = Particle(position=Vec3(1.0, 1.05, 1.0))
    distances = compute_density(particle, [neighbor], params)
    assert distances == [pytest.approx(0.05)]


def test_density_coincident_neighbor_is_kernel_peak(params):
    particle = Particle(position=Vec3(1.0, 1.0, 1.0))
    neighbor = Particle(position=Vec3(1.0, 1.0, 1.0), mass=2.0)
    compute_density(particle, [neighbor], params)
    assert particle.density == pytest.approx(2.0 * params.kernel1 * params.h_scaled2 ** 3)


def test_density_decreases_with_distance_and_adds_up(params):
    particle = Particle(position=Vec3(1.0, 1.0, 1.0))
    near = Particle(position=Vec3(1.02, 1.0, 1.0))
    far = Particle(position=Vec3(1.08, 1.0, 1.0))
    compute_density(particle, [near], params)
    near_density = particle.density
    compute_density(particle, [far], params)
    far_density = particle.density
    compute_density(particle, [near, far], params)
    assert near_density > far_density > 0.0
    assert particle.density == pytest.approx(near_density + far_density)


def test_density_beyond_h_contributes_nothing(params):
    particle = Particle(position=Vec3(1.0, 1.0, 1.0))
    outside = Particle(position=Vec3(1.0, 1.0, 1.0 + 2 * params.h))
    compute_density(particle, [outside], params)
    assert particle.density == 0.0


def test_central_gravity_zero_at_centre(params):
    assert central_gravity(params.central_position, params) == Vec3(0.0, 0.0, 0.0)


def test_central_gravity_points_inwards_and_is_symmetric(params):
    centre = params.central_position
    right = central_gravity(centre + Vec3(1.0, 0.0, 0.0), params)
    left = central_gravity(centre - Vec3(1.0, 0.0, 0.0), params)
    assert right.x < 0.0 < left.x
    assert right.x == pytest.approx(-left.x)
    assert right.y == 0.0 and right.z == 0.0


def test_acceleration_without_neighbors_is_gravity(params):
    position = params.central_position + Vec3(0.0, 0.0, 3.0)
    particle = Particle(position=position)
    acceleration = compute_acceleration(particle, [], [], params)
    assert acceleration == central_gravity(position, params)
    assert particle.acceleration == acceleration


def test_acceleration_is_clamped_to_cfl_limit():
    params = Parameters(particle_count=0, cfl_limit=1.0)
    particle = Particle(position=params.central_position + Vec3(1.0, 0.0, 0.0))
    acceleration = compute_acceleration(particle, [], [], params)
    assert acceleration.length() == pytest.approx(params.cfl_limit)
    assert acceleration.x < 0.0


def test_viscosity_drags_towards_neighbor_velocity(params):
    centre = params.central_position
    particle = Particle(position=centre, density=params.rho0)
    neighbor = Particle(
        position=centre + Vec3(0.05, 0.0, 0.0),
        velocity=Vec3(0.0, 1.0, 0.0),
        density=params.rho0,
    )
    acceleration = compute_acceleration(particle, [neighbor], [0.05], params)
    assert acceleration.y > 0.0
    assert acceleration.x == pytest.approx(0.0)
    assert acceleration.z == pytest.approx(0.0)


def test_pressure_pushes_away_from_neighbor(params):
    centre = params.central_position
    particle = Particle(position=centre, density=2 * params.rho0)
    neighbor = Particle(position=centre + Vec3(0.05, 0.0, 0.0), density=2 * params.rho0)
    acceleration = compute_acceleration(particle, [neighbor], [0.05], params)
    assert acceleration.x < 0.0
    assert acceleration.y == pytest.approx(0.0)


def test_acceleration_requires_matching_distances(params):
    particle = Particle(position=params.central_position)
    with pytest.raises(ValueError):
        compute_acceleration(particle, [Particle()], [], params)


def test_integrate_at_rest_in_centre_stays(params):
    particle = Particle(position=params.central_position)
    integrate(particle, params)
    assert particle.position == params.central_position
    assert particle.velocity == Vec3(0.0, 0.0, 0.0)


def test_integrate_drifts_and_is_pulled_back(params):
    centre = params.central_position
    particle = Particle(position=centre, velocity=Vec3(1.0, 0.0, 0.0))
    integrate(particle, params)
    assert particle.position.x == pytest.approx(centre.x + params.time_step)
    assert particle.position.y == centre.y
    assert particle.velocity.x < 1.0


def test_apply_boundary_reflects_velocity():
    position, velocity = apply_boundary(
        Vec3(0.5, 1.0, 1.0), 1.0, 0.5, Vec3(1.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0), 0.001
    )
    assert velocity == Vec3(1.0, 0.0, 0.0)
    assert 0.0 < position.x < 0.001
    assert (position.y, position.z) == (1.0, 1.0)


def test_boundaries_leave_inside_particle_alone(params):
    start = Vec3(1.0, 1.0, 1.0)
    moved = Vec3(1.1, 1.0, 1.0)
    velocity = Vec3(1.0, 0.0, 0.0)
    assert handle_boundary_conditions(start, velocity, moved, 0.1, params) == (moved, velocity)


def test_boundaries_bounce_off_lower_wall(params):
    position, velocity = handle_boundary_conditions(
        Vec3(0.1, 1.0, 1.0), Vec3(-1.0, 0.0, 0.0), Vec3(-0.1, 1.0, 1.0), 0.2, params
    )
    assert velocity == Vec3(1.0, 0.0, 0.0)
    assert 0.0 <= position.x < 0.1
    assert (position.y, position.z) == (1.0, 1.0)


def test_boundaries_bounce_off_upper_wall(params):
    upper = params.bounds[2]
    position, velocity = handle_boundary_conditions(
        Vec3(1.0, 1.0, upper - 0.1),
        Vec3(0.0, 0.0, 1.0),
        Vec3(1.0, 1.0, upper + 0.1),
        0.2,
        params,
    )
    assert velocity.z < 0.0
    assert math.isclose(abs(velocity.z), 1.0)
    assert position.z <= upper