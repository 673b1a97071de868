"""Stylesheet and script shipped under ``static/`` in server projects."""

BASE_CSS = """\
/* Base styles generated by pagecraft */
* {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

html, body {
  width: 100%;
  min-height: 100%;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
  line-height: 1.6;
  color: #333;
}

.page-content {
  width: 100%;
  min-height: 100vh;
}

.component {
  position: relative;
}

/* Navbar Styles */
.navbar {
  display: flex;
  align-items: center;
  justify-content: space-between;
  padding: 0 20px;
  min-height: 60px;
  background-color: #ffffff;
  box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}

.navbar-brand {
  font-size: 1.25rem;
  font-weight: 600;
  text-decoration: none;
  color: inherit;
}

.navbar-nav {
  display: flex;
  list-style: none;
  gap: 1rem;
}

.navbar-nav a {
  text-decoration: none;
  color: inherit;
  padding: 0.5rem 1rem;
  transition: color 0.2s;
}

.navbar-nav a:hover {
  color: #007bff;
}

.navbar-nav .active a {
  color: #007bff;
  font-weight: 600;
}

/* Container defaults */
.container {
  width: 100%;
}

/* DataList Styles */
.datalist-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
  gap: 1.5rem;
}

.card {
  background: white;
  border-radius: 8px;
  box-shadow: 0 2px 8px rgba(0,0,0,0.1);
  overflow: hidden;
}

.card-image {
  width: 100%;
  height: 200px;
  object-fit: cover;
}

.card-title {
  padding: 1rem;
  margin: 0;
}

.card-description {
  padding: 0 1rem 1rem;
  color: #666;
}

/* Table Styles */
.data-table {
  width: 100%;
  border-collapse: collapse;
}

.data-table th,
.data-table td {
  padding: 12px;
  text-align: left;
  border-bottom: 1px solid #e0e0e0;
}

.data-table th {
  background-color: #f5f5f5;
  font-weight: 600;
}

/* Button Styles */
.button {
  display: inline-block;
  padding: 8px 16px;
  font-weight: 500;
  text-align: center;
  text-decoration: none;
  border: none;
  border-radius: 6px;
  cursor: pointer;
  transition: all 0.2s;
}

/* Responsive */
@media (max-width: 768px) {
  .navbar {
    flex-wrap: wrap;
  }

  .navbar-nav {
    flex-direction: column;
    width: 100%;
    display: none;
  }

  .navbar-nav.active {
    display: flex;
  }

  .datalist-grid {
    grid-template-columns: 1fr;
  }
}
"""

BASE_JS = """\
document.addEventListener('DOMContentLoaded', function() {
  // Mobile navbar toggle
  const navbarToggle = document.querySelector('.navbar-toggle');
  if (navbarToggle) {
    navbarToggle.addEventListener('click', function() {
      const navList = document.querySelector('.navbar-nav');
      if (navList) {
        navList.classList.toggle('active');
      }
    });
  }
});
"""

__all__ = ["BASE_CSS", "BASE_JS"]
