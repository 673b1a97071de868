"""Shared stylesheet and script bundled with static exports."""

BASE_CSS = """\
/* Base styles generated by pagecraft */
* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
  line-height: 1.6;
  color: #333;
}

.component {
  position: relative;
}

/* Button Styles */
.btn {
  display: inline-block;
  font-weight: 500;
  text-align: center;
  white-space: nowrap;
  vertical-align: middle;
  user-select: none;
  border: none;
  border-radius: 6px;
  padding: 8px 16px;
  font-size: 14px;
  line-height: 1.5;
  transition: all 0.2s ease-in-out;
  cursor: pointer;
}

.btn-primary { background-color: #007bff; color: white; }
.btn-primary:hover { background-color: #0056b3; }
.btn-secondary { background-color: #6c757d; color: white; }
.btn-secondary:hover { background-color: #545b62; }
.btn-success { background-color: #28a745; color: white; }
.btn-success:hover { background-color: #218838; }
.btn-danger { background-color: #dc3545; color: white; }
.btn-danger:hover { background-color: #c82333; }
.btn-warning { background-color: #ffc107; color: #212529; }
.btn-warning:hover { background-color: #e0a800; }
.btn-outline { background-color: transparent; color: #007bff; border: 2px solid #007bff; }
.btn-outline:hover { background-color: #007bff; color: white; }

.btn-small { padding: 6px 12px; font-size: 13px; }
.btn-medium { padding: 8px 16px; font-size: 14px; }
.btn-large { padding: 12px 24px; font-size: 16px; }

.btn:disabled {
  opacity: 0.65;
  cursor: not-allowed;
}

/* Navbar Styles */
.navbar {
  display: flex;
  align-items: center;
  padding: 1rem;
  background-color: #fff;
  box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}

.navbar-container {
  display: flex;
  align-items: center;
  justify-content: space-between;
  width: 100%;
  max-width: 1200px;
  margin: 0 auto;
}

.navbar-brand {
  font-size: 1.25rem;
  font-weight: 700;
  color: #333;
  text-decoration: none;
}

.navbar-nav {
  display: flex;
  list-style: none;
  margin: 0;
  padding: 0;
  gap: 0.5rem;
}

.nav-item {
  margin: 0;
}

.nav-link {
  display: block;
  padding: 0.5rem 1rem;
  color: #666;
  text-decoration: none;
  border-radius: 4px;
  transition: all 0.2s;
}

.nav-link:hover {
  color: #007bff;
  background-color: #f8f9fa;
}

.nav-item.active .nav-link {
  color: #007bff;
  font-weight: 600;
}

.navbar-toggle {
  display: none;
  background: none;
  border: none;
  padding: 0.5rem;
  cursor: pointer;
}

.navbar-dark {
  background-color: #1a1a2e;
}

.navbar-dark .navbar-brand,
.navbar-dark .nav-link {
  color: #fff;
}

.navbar-dark .nav-link:hover {
  background-color: rgba(255,255,255,0.1);
}

/* Container Styles */
.component-container {
  display: flex;
  flex-direction: column;
}

.scrollable-container {
  overflow: auto;
}

/* Image Styles */
.component-image {
  max-width: 100%;
  height: auto;
}

/* Textbox Styles */
.textbox {
  padding: 1rem;
}

/* Mobile Responsive */
@media (max-width: 768px) {
  .navbar-nav {
    display: none;
    flex-direction: column;
    position: absolute;
    top: 100%;
    left: 0;
    right: 0;
    background: inherit;
    padding: 1rem;
    box-shadow: 0 4px 6px rgba(0,0,0,0.1);
  }

  .navbar-nav.active {
    display: flex;
  }

  .navbar-toggle {
    display: block;
  }

  .navbar-toggle-icon {
    display: block;
    width: 24px;
    height: 2px;
    background-color: #333;
    position: relative;
  }

  .navbar-toggle-icon::before,
  .navbar-toggle-icon::after {
    content: '';
    position: absolute;
    width: 100%;
    height: 2px;
    background-color: #333;
    left: 0;
  }

  .navbar-toggle-icon::before { top: -6px; }
  .navbar-toggle-icon::after { top: 6px; }

  .navbar-dark .navbar-toggle-icon,
  .navbar-dark .navbar-toggle-icon::before,
  .navbar-dark .navbar-toggle-icon::after {
    background-color: #fff;
  }
}
"""

BASE_JS = """\
document.addEventListener('DOMContentLoaded', function() {
  // Mobile navbar toggle
  const navbarToggles = document.querySelectorAll('.navbar-toggle');
  navbarToggles.forEach(function(toggle) {
    toggle.addEventListener('click', function() {
      const navbar = this.closest('.navbar');
      const navList = navbar.querySelector('.navbar-nav');
      if (navList) {
        navList.classList.toggle('active');
      }
    });
  });

  // Smooth scroll for anchor links
  document.querySelectorAll('a[href^="#"]').forEach(function(anchor) {
    anchor.addEventListener('click', function(e) {
      const href = this.getAttribute('href');
      if (href && href !== '#') {
        e.preventDefault();
        const target = document.querySelector(href);
        if (target) {
          target.scrollIntoView({ behavior: 'smooth' });
        }
      }
    });
  });
});
"""

__all__ = ["BASE_CSS", "BASE_JS"]
