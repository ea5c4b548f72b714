"""
Example: a package resource type with Debian and Red Hat providers.

Check which provider this host would use:
    hostfit check examples/package_types.py -v
"""

from hostfit import Provider, ResourceType

package = ResourceType("package")
package.feature("versionable", "The provider can install a specific version.")
package.feature("holdable", "The provider can prevent upgrades of a package.")
package.newproperty("ensure", "present, absent, or a version string")
package.newproperty("mark", "Whether the package is held", required_features=["holdable"])
package.newparam("name", "Package name")


@package.provide(
    "dpkg",
    commands={"dpkg": "dpkg", "dpkg_query": "dpkg-query"},
    features=["holdable"],
    resource_methods=True,
)
class Dpkg(Provider):
    """Low-level Debian packages; can query but not fetch."""

    @classmethod
    def instances(cls):
        output = cls.dpkg_query("-W", "--showformat", "${Package} ${Version}\\n")
        found = []
        for line in output.splitlines():
            name, _, version = line.partition(" ")
            found.append(cls({"name": name, "ensure": version}))
        return found

    def query(self):
        output = self.dpkg_query("-W", "--showformat", "${Version}", self.name)
        self.set(ensure=output.strip())
        return self.property_hash


@package.provide(
    "apt",
    source="dpkg",
    commands={"apt_get": "apt-get"},
    optional_commands={"apt_mark": "apt-mark"},
    defaultfor={"osfamily": "debian"},
    features=["versionable", "holdable"],
    resource_methods=True,
)
class Apt(Dpkg):
    """Debian packages installed with apt-get."""

    def install(self):
        target = self.name
        if self.resource is not None and self.resource["ensure"] not in (None, "present", "installed"):
            target = f"{self.name}={self.resource['ensure']}"
        self.apt_get("-q", "-y", "install", target)

    def hold(self):
        self.apt_mark("hold", self.name)


@package.provide(
    "yum",
    commands={"yum": "yum", "rpm": "rpm"},
    defaultfor={"osfamily": "redhat"},
    features=["versionable"],
    resource_methods=True,
)
class Yum(Provider):
    """Red Hat family packages installed with yum."""

    def install(self):
        self.yum("-y", "install", self.name)
