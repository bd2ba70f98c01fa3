"""Shared test fixtures."""

import json

import pytest

from laravel_app_developer.config import Settings

USER_MODEL = """<?php

namespace App\\Models;

use Illuminate\\Database\\Eloquent\\Factories\\HasFactory;
use Illuminate\\Foundation\\Auth\\User as Authenticatable;

class User extends Authenticatable
{
    use HasFactory, Notifiable;

    public function posts()
    {
        return $this->hasMany(Post::class);
    }

    protected function casts(): array
    {
        return [];
    }
}
"""

DASHBOARD_CONTROLLER = """<?php

namespace App\\Http\\Controllers\\Admin;

class DashboardController extends Controller
{
    public function __construct()
    {
    }

    public function index()
    {
        return view('dashboard');
    }

    private function helper()
    {
    }
}
"""

WEB_ROUTES = """<?php

use Illuminate\\Support\\Facades\\Route;

Route::get('/', function () {
    return view('welcome');
});

Route::get('/dashboard', [DashboardController::class, 'index'])->middleware(['auth', 'verified'])->name('dashboard');

Route::post('/posts', 'PostController@store')->name('posts.store');
"""


@pytest.fixture
def laravel_project(tmp_path):
    """A small Laravel application tree."""
    root = tmp_path / "shop"

    models = root / "app" / "Models"
    models.mkdir(parents=True)
    (models / "User.php").write_text(USER_MODEL)
    (models / "vendor").mkdir()
    (models / "vendor" / "Hidden.php").write_text("<?php class Hidden {}\n")

    controllers = root / "app" / "Http" / "Controllers" / "Admin"
    controllers.mkdir(parents=True)
    (controllers / "DashboardController.php").write_text(DASHBOARD_CONTROLLER)

    (root / "routes").mkdir()
    (root / "routes" / "web.php").write_text(WEB_ROUTES)

    views = root / "resources" / "views"
    (views / "layouts").mkdir(parents=True)
    (views / "welcome.blade.php").write_text("<h1>Welcome</h1>\n")
    (views / "layouts" / "app.blade.php").write_text("<html>@yield('content')</html>\n")

    (root / "composer.json").write_text(json.dumps({
        "name": "acme/shop",
        "require": {"php": "^8.2", "laravel/framework": "^11.0"},
        "require-dev": {"pestphp/pest": "^2.0"},
    }))
    (root / ".env").write_text('APP_NAME="Acme Shop"\nAPP_ENV=local\n')
    return root


@pytest.fixture
def settings(tmp_path):
    return Settings(project_root=tmp_path, output_directory=tmp_path / "plans")
