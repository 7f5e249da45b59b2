"""BPI response bodies shared by the tests."""

NODE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bpi version="0.1">
  <item type="entity" name="node" id="42">
    <property name="title" type="string">Concert in the park</property>
    <property name="body" type="string" title="Body">Bring a blanket</property>
    <property name="category" type="string">Event</property>
  </item>
</bpi>
"""

COLLECTION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bpi version="0.1">
  <item type="collection" total="1"/>
  <item type="entity" name="node" id="42">
    <property name="title" type="string">Concert in the park</property>
  </item>
</bpi>
"""

ENDPOINT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bpi version="0.1">
  <item type="resource" name="node">
    <hypermedia>
      <link rel="collection" href="http://example.com/node/collection" title="Nodes"/>
      <query rel="item" href="http://example.com/node/item/{id}" title="Node by id">
        <param name="id" required="true"/>
      </query>
      <template rel="push" href="http://example.com/node" method="POST">
        <field name="title" type="string" required="true"/>
        <field name="category" type="string">
          <option value="Event"/>
          <option value="Other"/>
        </field>
        <field name="body" type="string" value="empty"/>
      </template>
    </hypermedia>
  </item>
  <item type="resource" name="profile">
    <hypermedia>
      <link rel="collection" href="http://example.com/profile/collection"/>
    </hypermedia>
  </item>
  <hypermedia>
    <link rel="self" href="http://example.com/"/>
    <query rel="search" href="http://example.com/node/collection">
      <param name="search"/>
      <param name="amount"/>
    </query>
  </hypermedia>
</bpi>
"""

FACETS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bpi version="0.1">
  <item type="collection" total="4"/>
  <item type="entity" name="node" id="1"/>
  <item type="facet" name="category">
    <property name="Event" title="Events">3</property>
    <property name="Other">1</property>
  </item>
  <item type="facet" name="agency_id">
    <property name="999999">4</property>
  </item>
</bpi>
"""
